"""Turn archive entries into raw bytes or typed data sets."""

from __future__ import annotations

import xml.etree.ElementTree as ET
import zipfile
import zlib
from typing import TypeVar

from tiangong_lca_ilcd.core.exceptions import DecodeError, EntryReadError
from tiangong_lca_ilcd.core.logging import get_logger

from .bindings import Binding, local_name

LOGGER = get_logger(__name__)

T = TypeVar("T")

# zipfile surfaces damaged or unsupported entries through several exception types.
_READ_ERRORS = (
    OSError,
    EOFError,
    zipfile.BadZipFile,
    zlib.error,
    NotImplementedError,
    RuntimeError,
    ValueError,
)


def read_entry(
    archive: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    *,
    max_bytes: int | None = None,
) -> bytes:
    """Return the entry's content verbatim."""
    if max_bytes is not None and info.file_size > max_bytes:
        raise EntryReadError(
            f"Entry '{info.filename}' is {info.file_size} bytes, above the limit of {max_bytes}",
            info.filename,
        )
    try:
        with archive.open(info) as handle:
            return handle.read()
    except _READ_ERRORS as exc:
        LOGGER.debug("decode.read_failed", entry=info.filename, error=str(exc))
        raise EntryReadError(f"Cannot read entry '{info.filename}': {exc}", info.filename) from exc


def decode_element(
    element: ET.Element,
    binding: Binding[T],
    *,
    entry_name: str | None = None,
) -> T:
    """Build a model from a parsed document element."""
    if binding.root is not None and local_name(element.tag) != binding.root:
        raise DecodeError(
            f"Expected document element <{binding.root}> but found "
            f"<{local_name(element.tag)}> in '{entry_name or '<bytes>'}'",
            entry_name,
        )
    try:
        return binding.decode(element)
    except DecodeError as exc:
        if exc.entry_name is not None or entry_name is None:
            raise
        raise DecodeError(f"{exc} in '{entry_name}'", entry_name) from exc


def decode_bytes(data: bytes, binding: Binding[T], *, entry_name: str | None = None) -> T:
    """Parse XML bytes and build the model described by ``binding``.

    Elements that the binding does not mention are ignored.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise DecodeError(
            f"Malformed XML in '{entry_name or '<bytes>'}': {exc}",
            entry_name,
        ) from exc
    return decode_element(root, binding, entry_name=entry_name)


def decode_entry(
    archive: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    binding: Binding[T],
    *,
    max_bytes: int | None = None,
) -> T:
    """Read an entry and decode it into a typed data set.

    Read failures are reported as :class:`DecodeError` chained to the
    underlying :class:`EntryReadError`.
    """
    try:
        data = read_entry(archive, info, max_bytes=max_bytes)
    except EntryReadError as exc:
        raise DecodeError(str(exc), info.filename) from exc
    return decode_bytes(data, binding, entry_name=info.filename)


__all__ = ["decode_bytes", "decode_element", "decode_entry", "read_entry"]
