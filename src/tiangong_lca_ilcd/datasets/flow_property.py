"""Flow property data sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import DataSet, DataSetType
from .commons import Classification, DataEntry, LangString, Publication, Ref


@dataclass(frozen=True, slots=True)
class FlowPropertyInfo:
    uuid: str = ""
    name: LangString = field(default_factory=LangString)
    synonyms: LangString = field(default_factory=LangString)
    classifications: tuple[Classification, ...] = ()
    comment: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class FlowProperty(DataSet):
    data_set_type: ClassVar[DataSetType] = DataSetType.FLOW_PROPERTY

    info: FlowPropertyInfo | None = None
    reference_unit_group: Ref | None = None
    data_entry: DataEntry | None = None
    publication: Publication | None = None


__all__ = ["FlowProperty", "FlowPropertyInfo"]
