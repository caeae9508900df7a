from __future__ import annotations

import pytest

from tiangong_lca_ilcd.archive.paths import (
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
from tiangong_lca_ilcd.datasets import DataSetType

UUID = "123e4567-e89b-12d3-a456-426614174000"


@pytest.mark.parametrize(
    ("predicate", "path"),
    [
        (is_process_path, f"ILCD/processes/{UUID}.xml"),
        (is_flow_path, f"ILCD/flows/{UUID}.xml"),
        (is_flow_property_path, f"ILCD/flowproperties/{UUID}.xml"),
        (is_unit_group_path, f"ILCD/unitgroups/{UUID}.xml"),
        (is_source_path, f"ILCD/sources/{UUID}.xml"),
        (is_contact_path, f"ILCD/contacts/{UUID}.xml"),
        (is_method_path, f"ILCD/lciamethods/{UUID}.xml"),
    ],
)
def test_type_predicates_accept_their_folder(predicate, path: str) -> None:
    assert predicate(path)


def test_predicates_require_xml_suffix() -> None:
    assert not is_flow_path(f"ILCD/flows/{UUID}.json")
    assert not is_flow_path(f"ILCD/flows/{UUID}.XML")
    assert not is_source_path("ILCD/sources/")


def test_flow_folder_does_not_match_flow_properties() -> None:
    path = f"ILCD/flowproperties/{UUID}.xml"
    assert not is_flow_path(path)
    assert classify_path(path) is DataSetType.FLOW_PROPERTY


def test_folder_token_is_matched_anywhere_in_path() -> None:
    path = "ILCD/flows/processes-overview.xml"
    assert is_flow_path(path)
    assert is_process_path(path)
    assert classify_path(path) is DataSetType.PROCESS


def test_classify_path_ignores_other_entries() -> None:
    assert classify_path("META-INF/MANIFEST.MF") is None
    assert classify_path("ILCD/ILCDLocations.xml") is None
    assert classify_path(f"ILCD/contacts/{UUID}.xml") is DataSetType.CONTACT


def test_matches_data_set_requires_uuid_substring() -> None:
    path = f"ILCD/flows/{UUID}_01.00.000.xml"
    assert matches_data_set(path, DataSetType.FLOW, UUID)
    assert not matches_data_set(path, DataSetType.PROCESS, UUID)
    assert not matches_data_set(path, DataSetType.FLOW, "00000000-0000-0000-0000-000000000000")
    assert matches_data_set(path, DataSetType.FLOW, UUID[:8])


def test_is_data_set_path_accepts_folder_names() -> None:
    assert is_data_set_path(f"ILCD/unitgroups/{UUID}.xml", "unitgroups")
