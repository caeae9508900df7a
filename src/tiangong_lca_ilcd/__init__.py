"""Reader for ILCD life cycle inventory zip packages."""

from .archive import Visit, ZipReader, classify_path
from .core import (
    ArchiveClosedError,
    DecodeError,
    EntryReadError,
    ILCDReaderError,
    NotFoundError,
    OpenError,
    Settings,
    configure_logging,
    get_settings,
)
from .datasets import (
    Classification,
    Contact,
    DataSet,
    DataSetType,
    Flow,
    FlowProperty,
    LangString,
    Method,
    Process,
    Ref,
    Source,
    UnitGroup,
)

__all__ = [
    "ArchiveClosedError",
    "Classification",
    "Contact",
    "DataSet",
    "DataSetType",
    "DecodeError",
    "EntryReadError",
    "Flow",
    "FlowProperty",
    "ILCDReaderError",
    "LangString",
    "Method",
    "NotFoundError",
    "OpenError",
    "Process",
    "Ref",
    "Settings",
    "Source",
    "UnitGroup",
    "Visit",
    "ZipReader",
    "classify_path",
    "configure_logging",
    "get_settings",
]
