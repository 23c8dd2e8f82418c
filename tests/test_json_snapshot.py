# tests/test_json_snapshot.py

from __future__ import annotations

import json

import pytest
from helpers import make_member, members_of

from family_tree.core.exceptions import SnapshotError
from family_tree.exporter import (
    append_snapshot,
    member_from_dict,
    member_to_dict,
    members_from_snapshot,
    parse_snapshot,
    read_snapshot,
    serialize_snapshot,
    write_snapshot,
)
from family_tree.utils import mock_file_path

ID_A = "6F1C2A52-8D0B-4E57-9E0A-2B1D7C7E1A01"
ID_B = "6F1C2A52-8D0B-4E57-9E0A-2B1D7C7E1A02"


def test_member_to_dict_uses_wire_keys() -> None:
    member = make_member("Anna", spouses=["Bob"], image_reference="anna.jpg", id=ID_A)

    data = member_to_dict(member)

    assert data["id"] == ID_A
    assert data["imageName"] == "anna.jpg"
    assert data["isImplicit"] is False
    assert data["level"] == -1
    assert data["spouses"] == ["Bob"]


def test_member_from_dict_defaults_and_level_mapping() -> None:
    member = member_from_dict({"name": " Anna ", "id": f" {ID_A} ", "level": -1})

    assert member is not None
    assert member.name == "Anna"
    assert member.id == ID_A
    assert member.level is None
    assert member.parents == []
    assert member.gender is None

    assert member_from_dict({"name": "Bob", "level": 3}).level == 3


def test_member_from_dict_without_name_is_none() -> None:
    assert member_from_dict({"id": ID_A}) is None
    assert member_from_dict({"name": "   "}) is None


def test_opaque_id_is_kept_as_written() -> None:
    member = member_from_dict({"name": "Anna", "id": "  p1 "})

    assert member.id == "p1"


def test_blank_or_missing_id_gets_fresh_identifier() -> None:
    blank = member_from_dict({"name": "Anna", "id": "   "})
    missing = member_from_dict({"name": "Anna"})

    assert len(blank.id) == 36
    assert len(missing.id) == 36
    assert blank.id != missing.id


def test_load_dedupes_opaque_ids_last_one_wins() -> None:
    imported = parse_snapshot(json.dumps([
        {"id": "p1", "name": "Old"},
        {"id": "p1", "name": "New"},
    ]))

    result = members_from_snapshot(imported)

    assert list(result) == ["New"]
    assert result["New"].id == "p1"


def test_append_matches_opaque_id_and_renames() -> None:
    members = members_from_snapshot(parse_snapshot(json.dumps([{"id": "p1", "name": "A"}])))

    change = append_snapshot(members, parse_snapshot(json.dumps([{"id": "p1", "name": "A2"}])))

    assert list(members) == ["A2"]
    assert members["A2"].id == "p1"
    assert change.renamed == [("A", "A2")]


def test_parse_snapshot_rejects_bad_json() -> None:
    with pytest.raises(SnapshotError):
        parse_snapshot("{not json")
    with pytest.raises(SnapshotError):
        parse_snapshot('{"name": "Anna"}')


def test_parse_snapshot_skips_unusable_entries() -> None:
    text = json.dumps([{"name": "Anna"}, 7, {"gender": "male"}])

    members = parse_snapshot(text)

    assert [m.name for m in members] == ["Anna"]


def test_load_semantics_last_record_wins_on_id() -> None:
    imported = [
        make_member("Old Name", id=ID_A),
        make_member("Bob", id=ID_B),
        make_member("New Name", id=ID_A),
    ]

    result = members_from_snapshot(imported)

    assert sorted(result) == ["Bob", "New Name"]
    assert result["New Name"].id == ID_A


def test_append_merges_relations_by_id() -> None:
    members = members_of(make_member("Anna", spouses=["A"], id=ID_A))

    change = append_snapshot(members, [make_member("Anna", spouses=["B"], id=ID_A)])

    assert members["Anna"].spouses == ["A", "B"]
    assert change.updated == ["Anna"]


def test_append_imported_name_wins() -> None:
    members = members_of(make_member("Ann", children=["Kid"], id=ID_A))

    change = append_snapshot(members, [make_member("Anna", parents=["Mum"], id=ID_A)])

    assert "Ann" not in members
    assert members["Anna"].children == ["Kid"]
    assert members["Anna"].parents == ["Mum"]
    assert change.renamed == [("Ann", "Anna")]


def test_append_new_id_with_taken_name_merges_by_name() -> None:
    members = members_of(make_member("Anna", spouses=["A"], id=ID_A))

    append_snapshot(members, [make_member("Anna", spouses=["B"], id=ID_B)])

    assert len(members) == 1
    assert members["Anna"].id == ID_A
    assert members["Anna"].spouses == ["A", "B"]


def test_append_adds_unknown_members() -> None:
    members = members_of(make_member("Anna", id=ID_A))

    change = append_snapshot(members, [make_member("Bob", id=ID_B)])

    assert sorted(members) == ["Anna", "Bob"]
    assert change.added == ["Bob"]


def test_write_and_read_snapshot(tmp_path) -> None:
    members = members_of(make_member("Anna", id=ID_A, level=0), make_member("Bob", id=ID_B))
    path = tmp_path / "out" / "tree.json"

    write_snapshot(members, path)
    loaded = read_snapshot(path)

    assert [m.name for m in loaded] == ["Anna", "Bob"]
    assert loaded[0].level == 0
    assert loaded[1].level is None


def test_serialize_compact_and_pretty() -> None:
    members = members_of(make_member("Anna", id=ID_A))

    assert "\n" not in serialize_snapshot(members)
    assert "\n" in serialize_snapshot(members, pretty=True)


def test_read_missing_snapshot_raises(tmp_path) -> None:
    with pytest.raises(SnapshotError):
        read_snapshot(tmp_path / "missing.json")


def test_mock_snapshot_reads() -> None:
    members = read_snapshot(mock_file_path("family.json"))

    assert [m.name for m in members] == ["Anna", "Bob", "Carl", "Dora"]
    assert members[0].image_reference is None
    assert members[3].is_implicit is True
