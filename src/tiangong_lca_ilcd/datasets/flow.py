"""Flow data sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import DataSet, DataSetType
from .commons import Class, Classification, DataEntry, LangString, Publication, Ref


@dataclass(frozen=True, slots=True)
class FlowName:
    base_name: LangString = field(default_factory=LangString)
    treatment: LangString = field(default_factory=LangString)
    mix_and_location: LangString = field(default_factory=LangString)
    properties: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class FlowInfo:
    uuid: str = ""
    name: FlowName | None = None
    synonyms: LangString = field(default_factory=LangString)
    classifications: tuple[Classification, ...] = ()
    # Elementary flow compartments (`elementaryFlowCategorization`).
    compartments: tuple[Class, ...] = ()
    cas: str = ""
    sum_formula: str = ""
    comment: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class FlowPropertyRef:
    """A flow property assigned to a flow, keyed by its internal ID."""

    internal_id: int = 0
    flow_property: Ref | None = None
    mean_value: float = 0.0
    comment: LangString = field(default_factory=LangString)


@dataclass(frozen=True, slots=True)
class Flow(DataSet):
    data_set_type: ClassVar[DataSetType] = DataSetType.FLOW

    info: FlowInfo | None = None
    reference_flow_property_id: int = 0
    flow_type: str = ""
    location: str = ""
    data_entry: DataEntry | None = None
    publication: Publication | None = None
    flow_properties: tuple[FlowPropertyRef, ...] = ()

    def reference_flow_property(self) -> FlowPropertyRef | None:
        """Return the flow property used for unit conversion, if declared."""
        for ref in self.flow_properties:
            if ref.internal_id == self.reference_flow_property_id:
                return ref
        return None


__all__ = ["Flow", "FlowInfo", "FlowName", "FlowPropertyRef"]
