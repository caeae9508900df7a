"""Classify archive entries by data set type from their path alone.

Matching is a plain substring test: a path belongs to a type when it
contains the type's folder token and ends with ``.xml``. Segments are not
parsed, so a folder token appearing elsewhere in a path also matches, and a
UUID lookup matches any path containing the UUID string.
"""

from __future__ import annotations

from tiangong_lca_ilcd.core.constants import XML_SUFFIX
from tiangong_lca_ilcd.datasets import DataSetType


def is_data_set_path(path: str, data_set_type: DataSetType) -> bool:
    return DataSetType(data_set_type).folder in path and path.endswith(XML_SUFFIX)


def matches_data_set(path: str, data_set_type: DataSetType, uuid: str) -> bool:
    """True when ``path`` is a ``data_set_type`` entry that contains ``uuid``."""
    return is_data_set_path(path, data_set_type) and uuid in path


def classify_path(path: str) -> DataSetType | None:
    """Return the first data set type whose folder token the path carries."""
    for data_set_type in DataSetType:
        if is_data_set_path(path, data_set_type):
            return data_set_type
    return None


def is_process_path(path: str) -> bool:
    return is_data_set_path(path, DataSetType.PROCESS)


def is_flow_path(path: str) -> bool:
    return is_data_set_path(path, DataSetType.FLOW)


def is_flow_property_path(path: str) -> bool:
    return is_data_set_path(path, DataSetType.FLOW_PROPERTY)


def is_unit_group_path(path: str) -> bool:
    return is_data_set_path(path, DataSetType.UNIT_GROUP)


def is_source_path(path: str) -> bool:
    return is_data_set_path(path, DataSetType.SOURCE)


def is_contact_path(path: str) -> bool:
    return is_data_set_path(path, DataSetType.CONTACT)


def is_method_path(path: str) -> bool:
    return is_data_set_path(path, DataSetType.METHOD)


__all__ = [
    "classify_path",
    "is_contact_path",
    "is_data_set_path",
    "is_flow_path",
    "is_flow_property_path",
    "is_method_path",
    "is_process_path",
    "is_source_path",
    "is_unit_group_path",
    "matches_data_set",
]
