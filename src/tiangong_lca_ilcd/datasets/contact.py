"""Contact data sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import DataSet, DataSetType
from .commons import Classification, DataEntry, LangString, Publication


@dataclass(frozen=True, slots=True)
class ContactInfo:
    uuid: str = ""
    short_name: LangString = field(default_factory=LangString)
    name: LangString = field(default_factory=LangString)
    classifications: tuple[Classification, ...] = ()
    address: LangString = field(default_factory=LangString)
    telephone: str = ""
    email: str = ""
    www: str = ""


@dataclass(frozen=True, slots=True)
class Contact(DataSet):
    data_set_type: ClassVar[DataSetType] = DataSetType.CONTACT

    info: ContactInfo | None = None
    data_entry: DataEntry | None = None
    publication: Publication | None = None


__all__ = ["Contact", "ContactInfo"]
