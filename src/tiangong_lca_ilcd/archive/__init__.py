"""Access to data sets stored in ILCD zip packages."""

from .paths import (
    classify_path,
    is_contact_path,
    is_data_set_path,
    is_flow_path,
    is_flow_property_path,
    is_method_path,
    is_process_path,
    is_source_path,
    is_unit_group_path,
    matches_data_set,
)
from .reader import Visit, ZipReader

__all__ = [
    "Visit",
    "ZipReader",
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
