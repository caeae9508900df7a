"""Process data sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import DataSet, DataSetType
from .commons import Classification, DataEntry, LangString, Publication, Ref


@dataclass(frozen=True, slots=True)
class ProcessName:
    base_name: LangString = field(default_factory=LangString)
    treatment: LangString = field(default_factory=LangString)
    mix_and_location: LangString = field(default_factory=LangString)
    functional_unit: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class ProcessInfo:
    uuid: str = ""
    name: ProcessName | None = None
    synonyms: LangString = field(default_factory=LangString)
    classifications: tuple[Classification, ...] = ()
    comment: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class QuantitativeReference:
    type: str = ""
    reference_flow_ids: tuple[int, ...] = ()
    functional_unit: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class ProcessTime:
    reference_year: str = ""
    valid_until: str = ""
    description: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class Exchange:
    internal_id: int = 0
    flow: Ref | None = None
    location: str = ""
    direction: str = ""
    mean_amount: float = 0.0
    resulting_amount: float = 0.0
    comment: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class LCIAResult:
    method: Ref | None = None
    mean_amount: float = 0.0


@dataclass(frozen=True, slots=True)
class Process(DataSet):
    data_set_type: ClassVar[DataSetType] = DataSetType.PROCESS

    info: ProcessInfo | None = None
    quantitative_reference: QuantitativeReference | None = None
    time: ProcessTime | None = None
    location: str = ""
    technology: LangString = field(default_factory=LangString)
    process_type: str = ""
    data_entry: DataEntry | None = None
    publication: Publication | None = None
    exchanges: tuple[Exchange, ...] = ()
    lcia_results: tuple[LCIAResult, ...] = ()

    def reference_exchanges(self) -> tuple[Exchange, ...]:
        """Exchanges named as quantitative reference, in exchange order."""
        if self.quantitative_reference is None:
            return ()
        ids = set(self.quantitative_reference.reference_flow_ids)
        return tuple(exchange for exchange in self.exchanges if exchange.internal_id in ids)

    def reference_exchange(self) -> Exchange | None:
        exchanges = self.reference_exchanges()
        return exchanges[0] if exchanges else None


__all__ = [
    "Exchange",
    "LCIAResult",
    "Process",
    "ProcessInfo",
    "ProcessName",
    "ProcessTime",
    "QuantitativeReference",
]
