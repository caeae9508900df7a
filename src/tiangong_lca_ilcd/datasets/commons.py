"""Sub-documents shared by every ILCD data set type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, slots=True)
class LangStringItem:
    """A single ``xml:lang`` tagged text value."""

    lang: str
    value: str


@dataclass(frozen=True, slots=True)
class LangString:
    """Multi-language string; the first item of a language wins on lookup."""

    items: tuple[LangStringItem, ...] = ()

    def get(self, lang: str) -> str:
        """Return the text for ``lang`` or an empty string."""
        for item in self.items:
            if item.lang == lang:
                return item.value
        return ""

    def first(self) -> str:
        return self.items[0].value if self.items else ""

    def languages(self) -> tuple[str, ...]:
        return tuple(item.lang for item in self.items)

    def __iter__(self) -> Iterator[LangStringItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


@dataclass(frozen=True, slots=True)
class Ref:
    """Global reference to another data set.

    A reference is plain data: it is never resolved against the package it
    was read from. Pass ``uuid`` back to a reader to load the target.
    """

    uuid: str = ""
    type: str = ""
    uri: str = ""
    version: str = ""
    name: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class Class:
    """One category of a classification."""

    level: int = 0
    class_id: str = ""
    name: str = ""


@dataclass(frozen=True, slots=True)
class Classification:
    """Flat list of classes annotated with their level in the hierarchy."""

    name: str = ""
    classes: tuple[Class, ...] = ()

    def get_class(self, level: int) -> Class | None:
        """Return the first class with exactly the given level."""
        for item in self.classes:
            if item.level == level:
                return item
        return None

    def path(self) -> tuple[str, ...]:
        return tuple(item.name for item in sorted(self.classes, key=lambda c: c.level))


@dataclass(frozen=True, slots=True)
class DataEntry:
    """``administrativeInformation/dataEntryBy``."""

    time_stamp: str = ""
    data_formats: tuple[Ref, ...] = ()


@dataclass(frozen=True, slots=True)
class Publication:
    """``administrativeInformation/publicationAndOwnership``."""

    version: str = ""
    uri: str = ""
    owner: Ref | None = None


__all__ = [
    "Class",
    "Classification",
    "DataEntry",
    "LangString",
    "LangStringItem",
    "Publication",
    "Ref",
]
