"""Source data sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import DataSet, DataSetType
from .commons import Classification, DataEntry, LangString, Publication, Ref


@dataclass(frozen=True, slots=True)
class SourceInfo:
    uuid: str = ""
    short_name: LangString = field(default_factory=LangString)
    classifications: tuple[Classification, ...] = ()
    citation: str = ""
    publication_type: str = ""
    description: LangString = field(default_factory=LangString)
    file_uris: tuple[str, ...] = ()
    contacts: tuple[Ref, ...] = ()


@dataclass(frozen=True, slots=True)
class Source(DataSet):
    data_set_type: ClassVar[DataSetType] = DataSetType.SOURCE

    info: SourceInfo | None = None
    data_entry: DataEntry | None = None
    publication: Publication | None = None


__all__ = ["Source", "SourceInfo"]
