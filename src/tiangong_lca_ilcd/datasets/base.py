"""Behaviour shared by all typed data sets."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, ClassVar, Iterator

from .commons import Classification, Ref


class DataSetType(str, Enum):
    """ILCD data set types, valued by the package folder that holds them."""

    PROCESS = "processes"
    FLOW = "flows"
    FLOW_PROPERTY = "flowproperties"
    UNIT_GROUP = "unitgroups"
    SOURCE = "sources"
    CONTACT = "contacts"
    METHOD = "methods"

    @property
    def folder(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Reference type tag as written in ``@type`` attributes."""
        return _LABELS[self]


_LABELS = {
    DataSetType.PROCESS: "process data set",
    DataSetType.FLOW: "flow data set",
    DataSetType.FLOW_PROPERTY: "flow property data set",
    DataSetType.UNIT_GROUP: "unit group data set",
    DataSetType.SOURCE: "source data set",
    DataSetType.CONTACT: "contact data set",
    DataSetType.METHOD: "LCIA method data set",
}


class DataSet:
    """Mixin for data set models.

    Subclasses are frozen dataclasses with an ``info`` field holding the
    ``dataSetInformation`` section and a ``publication`` field.
    """

    __slots__ = ()

    data_set_type: ClassVar[DataSetType]

    @property
    def uuid(self) -> str:
        info = getattr(self, "info", None)
        return info.uuid if info is not None else ""

    @property
    def classifications(self) -> tuple[Classification, ...]:
        info = getattr(self, "info", None)
        return info.classifications if info is not None else ()

    @property
    def version(self) -> str:
        publication = getattr(self, "publication", None)
        return publication.version if publication is not None else ""

    def references(self) -> Iterator[Ref]:
        """Yield every reference embedded in the data set, in field order."""
        yield from _walk_refs(self)


def _walk_refs(value: Any) -> Iterator[Ref]:
    if isinstance(value, Ref):
        yield value
    elif isinstance(value, tuple):
        for item in value:
            yield from _walk_refs(item)
    elif is_dataclass(value) and not isinstance(value, type):
        for model_field in fields(value):
            yield from _walk_refs(getattr(value, model_field.name))


__all__ = ["DataSet", "DataSetType"]
