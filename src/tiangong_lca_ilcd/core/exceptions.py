"""Custom exceptions raised by the ILCD package reader."""

from __future__ import annotations


class ILCDReaderError(Exception):
    """Base exception for all reader failures."""


class OpenError(ILCDReaderError):
    """Raised when an ILCD package cannot be opened."""


class NotFoundError(ILCDReaderError):
    """Raised when no archive entry matches the requested data set."""

    def __init__(self, data_set_type: str, uuid: str) -> None:
        super().__init__(f"No {data_set_type} data set with UUID '{uuid}' in package")
        self.data_set_type = data_set_type
        self.uuid = uuid


class EntryReadError(ILCDReaderError, OSError):
    """Raised when the bytes of an archive entry cannot be read."""

    def __init__(self, message: str, entry_name: str | None = None) -> None:
        super().__init__(message)
        self.entry_name = entry_name


class ArchiveClosedError(EntryReadError):
    """Raised when a closed reader is used."""


class DecodeError(ILCDReaderError):
    """Raised when entry content does not map onto the expected data set."""

    def __init__(self, message: str, entry_name: str | None = None) -> None:
        super().__init__(message)
        self.entry_name = entry_name


class BindingError(ILCDReaderError):
    """Raised when a field binding does not match its model."""


class ConfigurationError(ILCDReaderError):
    """Raised when reader settings are invalid."""
