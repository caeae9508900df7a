"""Typed, immutable models of ILCD data sets."""

from .base import DataSet, DataSetType
from .commons import (
    Class,
    Classification,
    DataEntry,
    LangString,
    LangStringItem,
    Publication,
    Ref,
)
from .contact import Contact, ContactInfo
from .flow import Flow, FlowInfo, FlowName, FlowPropertyRef
from .flow_property import FlowProperty, FlowPropertyInfo
from .method import Factor, Method, MethodInfo
from .process import (
    Exchange,
    LCIAResult,
    Process,
    ProcessInfo,
    ProcessName,
    ProcessTime,
    QuantitativeReference,
)
from .source import Source, SourceInfo
from .unit_group import Unit, UnitGroup, UnitGroupInfo

__all__ = [
    "Class",
    "Classification",
    "Contact",
    "ContactInfo",
    "DataEntry",
    "DataSet",
    "DataSetType",
    "Exchange",
    "Factor",
    "Flow",
    "FlowInfo",
    "FlowName",
    "FlowProperty",
    "FlowPropertyInfo",
    "FlowPropertyRef",
    "LangString",
    "LangStringItem",
    "LCIAResult",
    "Method",
    "MethodInfo",
    "Process",
    "ProcessInfo",
    "ProcessName",
    "ProcessTime",
    "Publication",
    "QuantitativeReference",
    "Ref",
    "Source",
    "SourceInfo",
    "Unit",
    "UnitGroup",
    "UnitGroupInfo",
]
