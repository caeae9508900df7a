"""Read ILCD data sets from zip packages."""

from __future__ import annotations

import os
import zipfile
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterator, TypeVar

from tiangong_lca_ilcd.core.config import Settings, get_settings
from tiangong_lca_ilcd.core.exceptions import (
    ArchiveClosedError,
    DecodeError,
    NotFoundError,
    OpenError,
)
from tiangong_lca_ilcd.core.logging import get_logger
from tiangong_lca_ilcd.datasets import (
    Contact,
    DataSet,
    DataSetType,
    Flow,
    FlowProperty,
    Method,
    Process,
    Source,
    UnitGroup,
)
from tiangong_lca_ilcd.decoding import schemas
from tiangong_lca_ilcd.decoding.bindings import Binding
from tiangong_lca_ilcd.decoding.pipeline import decode_entry, read_entry

from .paths import is_data_set_path, matches_data_set

LOGGER = get_logger(__name__)

T = TypeVar("T")


class Visit(Enum):
    """Visitor answer controlling an enumeration."""

    CONTINUE = "continue"
    STOP = "stop"


def _should_stop(result: Any) -> bool:
    if result is None or result is Visit.CONTINUE:
        return False
    if result is Visit.STOP:
        return True
    raise TypeError(f"Visitors must return a Visit member or None, got {result!r}")


class ZipReader:
    """Facade over an open ILCD package.

    Every lookup scans the directory listing captured when the package was
    opened, in on-disk order, and the first matching entry wins. Nothing is
    indexed or cached; each call decodes a fresh value.

    A reader owns a single zip handle and is not safe to share between
    threads. Use it as a context manager or call :meth:`close`.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._path = Path(path)
        try:
            self._archive = zipfile.ZipFile(self._path)
        except FileNotFoundError as exc:
            raise OpenError(f"ILCD package '{self._path}' does not exist") from exc
        except (zipfile.BadZipFile, OSError, ValueError) as exc:
            raise OpenError(f"Cannot open ILCD package '{self._path}': {exc}") from exc
        self._entries = tuple(self._archive.infolist())
        self._closed = False
        LOGGER.debug("zip_reader.opened", path=str(self._path), entries=len(self._entries))

    def __enter__(self) -> "ZipReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the zip handle; further calls on the reader fail."""
        if self._closed:
            return
        self._closed = True
        self._archive.close()
        LOGGER.debug("zip_reader.closed", path=str(self._path))

    def _require_open(self) -> None:
        if self._closed:
            raise ArchiveClosedError(f"ILCD package '{self._path}' is closed")

    @property
    def _max_bytes(self) -> int | None:
        return self._settings.max_entry_bytes

    # Generic access

    def entry_names(self) -> list[str]:
        self._require_open()
        return [info.filename for info in self._entries]

    def find_entry(self, data_set_type: DataSetType, uuid: str) -> zipfile.ZipInfo | None:
        """Return the first entry of the given type whose path contains ``uuid``."""
        self._require_open()
        for info in self._entries:
            if matches_data_set(info.filename, data_set_type, uuid):
                return info
        return None

    def _require_entry(self, data_set_type: DataSetType, uuid: str) -> zipfile.ZipInfo:
        info = self.find_entry(data_set_type, uuid)
        if info is None:
            LOGGER.debug("zip_reader.not_found", data_set_type=data_set_type.folder, uuid=uuid)
            raise NotFoundError(DataSetType(data_set_type).label, uuid)
        return info

    def _decode(self, info: zipfile.ZipInfo, binding: Binding[T]) -> T:
        try:
            return decode_entry(self._archive, info, binding, max_bytes=self._max_bytes)
        except DecodeError as exc:
            LOGGER.warning("zip_reader.decode_failed", entry=info.filename, error=str(exc))
            raise

    def _get(self, data_set_type: DataSetType, uuid: str, binding: Binding[T]) -> T:
        info = self._require_entry(data_set_type, uuid)
        return self._decode(info, binding)

    def _iter(self, data_set_type: DataSetType, binding: Binding[T]) -> Iterator[T]:
        self._require_open()
        for info in self._entries:
            if not is_data_set_path(info.filename, data_set_type):
                continue
            self._require_open()
            yield self._decode(info, binding)

    def _each(
        self,
        data_set_type: DataSetType,
        binding: Binding[T],
        visitor: Callable[[T], Visit | None],
    ) -> None:
        visited = 0
        for data_set in self._iter(data_set_type, binding):
            visited += 1
            if _should_stop(visitor(data_set)):
                LOGGER.debug(
                    "zip_reader.each_stopped",
                    data_set_type=DataSetType(data_set_type).folder,
                    visited=visited,
                )
                return

    def get(self, data_set_type: DataSetType, uuid: str) -> DataSet:
        """Decode the data set of the given type and UUID."""
        data_set_type = DataSetType(data_set_type)
        return self._get(data_set_type, uuid, schemas.binding_for(data_set_type))

    def get_data(self, data_set_type: DataSetType, uuid: str) -> bytes:
        """Return the unparsed XML of the data set of the given type and UUID."""
        info = self._require_entry(DataSetType(data_set_type), uuid)
        return read_entry(self._archive, info, max_bytes=self._max_bytes)

    def iter_data_sets(self, data_set_type: DataSetType) -> Iterator[DataSet]:
        """Lazily decode every data set of a type, stopping at the first failure."""
        data_set_type = DataSetType(data_set_type)
        return self._iter(data_set_type, schemas.binding_for(data_set_type))

    def each(
        self,
        data_set_type: DataSetType,
        visitor: Callable[[DataSet], Visit | None],
    ) -> None:
        """Call ``visitor`` with every data set of a type until it returns ``Visit.STOP``.

        A data set that cannot be decoded aborts the enumeration with
        :class:`DecodeError`; entries after it are not visited.
        """
        data_set_type = DataSetType(data_set_type)
        self._each(data_set_type, schemas.binding_for(data_set_type), visitor)

    def iter_entries(self) -> Iterator[tuple[str, bytes]]:
        """Yield ``(name, bytes)`` for every entry in the package, in on-disk order."""
        self._require_open()
        for info in self._entries:
            self._require_open()
            yield info.filename, read_entry(self._archive, info, max_bytes=self._max_bytes)

    def each_entry(self, visitor: Callable[[str, bytes], Visit | None]) -> None:
        """Call ``visitor`` with the name and content of every entry.

        Read failures and exceptions raised by the visitor abort the walk and
        propagate to the caller.
        """
        for name, data in self.iter_entries():
            if _should_stop(visitor(name, data)):
                return

    # Processes

    def get_process(self, uuid: str) -> Process:
        return self._get(DataSetType.PROCESS, uuid, schemas.PROCESS)

    def get_process_data(self, uuid: str) -> bytes:
        return self.get_data(DataSetType.PROCESS, uuid)

    def iter_processes(self) -> Iterator[Process]:
        return self._iter(DataSetType.PROCESS, schemas.PROCESS)

    def each_process(self, visitor: Callable[[Process], Visit | None]) -> None:
        self._each(DataSetType.PROCESS, schemas.PROCESS, visitor)

    # Flows

    def get_flow(self, uuid: str) -> Flow:
        return self._get(DataSetType.FLOW, uuid, schemas.FLOW)

    def get_flow_data(self, uuid: str) -> bytes:
        return self.get_data(DataSetType.FLOW, uuid)

    def iter_flows(self) -> Iterator[Flow]:
        return self._iter(DataSetType.FLOW, schemas.FLOW)

    def each_flow(self, visitor: Callable[[Flow], Visit | None]) -> None:
        self._each(DataSetType.FLOW, schemas.FLOW, visitor)

    # Flow properties

    def get_flow_property(self, uuid: str) -> FlowProperty:
        return self._get(DataSetType.FLOW_PROPERTY, uuid, schemas.FLOW_PROPERTY)

    def get_flow_property_data(self, uuid: str) -> bytes:
        return self.get_data(DataSetType.FLOW_PROPERTY, uuid)

    def iter_flow_properties(self) -> Iterator[FlowProperty]:
        return self._iter(DataSetType.FLOW_PROPERTY, schemas.FLOW_PROPERTY)

    def each_flow_property(self, visitor: Callable[[FlowProperty], Visit | None]) -> None:
        self._each(DataSetType.FLOW_PROPERTY, schemas.FLOW_PROPERTY, visitor)

    # Unit groups

    def get_unit_group(self, uuid: str) -> UnitGroup:
        return self._get(DataSetType.UNIT_GROUP, uuid, schemas.UNIT_GROUP)

    def get_unit_group_data(self, uuid: str) -> bytes:
        return self.get_data(DataSetType.UNIT_GROUP, uuid)

    def iter_unit_groups(self) -> Iterator[UnitGroup]:
        return self._iter(DataSetType.UNIT_GROUP, schemas.UNIT_GROUP)

    def each_unit_group(self, visitor: Callable[[UnitGroup], Visit | None]) -> None:
        self._each(DataSetType.UNIT_GROUP, schemas.UNIT_GROUP, visitor)

    # Sources

    def get_source(self, uuid: str) -> Source:
        return self._get(DataSetType.SOURCE, uuid, schemas.SOURCE)

    def get_source_data(self, uuid: str) -> bytes:
        return self.get_data(DataSetType.SOURCE, uuid)

    def iter_sources(self) -> Iterator[Source]:
        return self._iter(DataSetType.SOURCE, schemas.SOURCE)

    def each_source(self, visitor: Callable[[Source], Visit | None]) -> None:
        self._each(DataSetType.SOURCE, schemas.SOURCE, visitor)

    # Contacts

    def get_contact(self, uuid: str) -> Contact:
        return self._get(DataSetType.CONTACT, uuid, schemas.CONTACT)

    def get_contact_data(self, uuid: str) -> bytes:
        return self.get_data(DataSetType.CONTACT, uuid)

    def iter_contacts(self) -> Iterator[Contact]:
        return self._iter(DataSetType.CONTACT, schemas.CONTACT)

    def each_contact(self, visitor: Callable[[Contact], Visit | None]) -> None:
        self._each(DataSetType.CONTACT, schemas.CONTACT, visitor)

    # LCIA methods

    def get_method(self, uuid: str) -> Method:
        return self._get(DataSetType.METHOD, uuid, schemas.METHOD)

    def get_method_data(self, uuid: str) -> bytes:
        return self.get_data(DataSetType.METHOD, uuid)

    def iter_methods(self) -> Iterator[Method]:
        return self._iter(DataSetType.METHOD, schemas.METHOD)

    def each_method(self, visitor: Callable[[Method], Visit | None]) -> None:
        self._each(DataSetType.METHOD, schemas.METHOD, visitor)


__all__ = ["Visit", "ZipReader"]
