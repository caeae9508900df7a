"""Shared core utilities for the ILCD package reader."""

from .config import Settings, get_settings, load_settings
from .exceptions import (
    ArchiveClosedError,
    BindingError,
    ConfigurationError,
    DecodeError,
    EntryReadError,
    ILCDReaderError,
    NotFoundError,
    OpenError,
)
from .logging import configure_logging, get_logger

__all__ = [
    "ArchiveClosedError",
    "BindingError",
    "ConfigurationError",
    "DecodeError",
    "EntryReadError",
    "ILCDReaderError",
    "NotFoundError",
    "OpenError",
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "load_settings",
]
