"""LCIA method data sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import DataSet, DataSetType
from .commons import Classification, DataEntry, LangString, Publication, Ref


@dataclass(frozen=True, slots=True)
class MethodInfo:
    uuid: str = ""
    name: LangString = field(default_factory=LangString)
    methodologies: tuple[str, ...] = ()
    impact_categories: tuple[str, ...] = ()
    impact_indicator: str = ""
    classifications: tuple[Classification, ...] = ()
    comment: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class Factor:
    """Characterisation factor of a flow."""

    flow: Ref | None = None
    direction: str = ""
    mean_value: float = 0.0
    location: str = ""


@dataclass(frozen=True, slots=True)
class Method(DataSet):
    data_set_type: ClassVar[DataSetType] = DataSetType.METHOD

    info: MethodInfo | None = None
    reference_quantity: Ref | None = None
    data_entry: DataEntry | None = None
    publication: Publication | None = None
    factors: tuple[Factor, ...] = ()


__all__ = ["Factor", "Method", "MethodInfo"]
