"""Unit group data sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import DataSet, DataSetType
from .commons import Classification, DataEntry, LangString, Publication


@dataclass(frozen=True, slots=True)
class UnitGroupInfo:
    uuid: str = ""
    name: LangString = field(default_factory=LangString)
    classifications: tuple[Classification, ...] = ()
    comment: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class Unit:
    internal_id: int = 0
    name: str = ""
    mean_value: float = 0.0
    comment: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class UnitGroup(DataSet):
    data_set_type: ClassVar[DataSetType] = DataSetType.UNIT_GROUP

    info: UnitGroupInfo | None = None
    reference_unit_id: int = 0
    data_entry: DataEntry | None = None
    publication: Publication | None = None
    units: tuple[Unit, ...] = ()

    def reference_unit(self) -> Unit | None:
        for unit in self.units:
            if unit.internal_id == self.reference_unit_id:
                return unit
        return None


__all__ = ["Unit", "UnitGroup", "UnitGroupInfo"]
