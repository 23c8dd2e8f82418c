# tests/test_engine.py

from __future__ import annotations

import json

import pytest

from family_tree import FamilyTreeEngine
from family_tree.config import FTConfig
from family_tree.core.exceptions import (
    DuplicateMemberError,
    EmptyNameError,
    MemberNotFoundError,
    SnapshotError,
)
from family_tree.utils import mock_file_path


@pytest.fixture
def engine() -> FamilyTreeEngine:
    return FamilyTreeEngine(config=FTConfig({}))


@pytest.fixture
def family(engine) -> FamilyTreeEngine:
    engine.import_bulk_text(mock_file_path("family.txt").read_text(encoding="utf-8"))
    return engine


def test_bulk_import_normalizes_and_assigns_levels(family) -> None:
    store = family.store

    assert store.get("Henry").parents == ["George", "Martha"]
    assert store.get("Henry").children == ["Ben", "Clara"]
    assert store.get("Dana").spouses == ["Ben"]
    assert store.get("George").level == 0
    assert store.get("Oscar").level == 1
    assert store.get("Dana").level == 2
    assert store.get("Eve").level == 3
    assert family.dirty is True


def test_bulk_import_merges_with_existing(family) -> None:
    family.import_bulk_text("NAME:Clara; SPOUSES:Hugo")

    assert family.store.get("Clara").spouses == ["Hugo"]
    assert family.store.get("Clara").parents == ["Alice", "Henry"]


def test_siblings_are_inferred_only_in_derived_view(family) -> None:
    derived = family.derived_members()

    assert derived["Ben"].siblings == ["Clara"]
    assert family.store.get("Ben").siblings == []
    assert family.derived_members(apply_sibling_inference=False)["Ben"].siblings == []


def test_full_tree_view(family) -> None:
    groups = family.get_all_levels()

    assert [g.names for g in groups] == [
        ["George", "Martha", "Walter"],
        ["Alice", "Henry", "Oscar"],
        ["Ben", "Dana", "Clara"],
        ["Eve"],
    ]


def test_focused_view_puts_focus_first(family) -> None:
    focus_id = family.focus("Clara")

    groups = family.current_levels()

    assert family.focused_member_id == focus_id
    assert [g.names for g in groups] == [
        ["George", "Martha", "Walter"],
        ["Alice", "Henry"],
        ["Clara", "Ben"],
    ]


def test_focused_view_excludes_great_grandparents(family) -> None:
    groups = family.get_connected_family_of(family.store.get("Eve").id)

    assert [g.names for g in groups] == [
        ["Alice", "Henry", "Oscar"],
        ["Ben", "Dana"],
        ["Eve"],
    ]


def test_clear_focus_returns_full_tree(family) -> None:
    family.focus("Eve")
    family.clear_focus()

    assert len(family.current_levels()) == 4


def test_focus_unknown_name_raises(family) -> None:
    with pytest.raises(MemberNotFoundError):
        family.focus("Nobody")


def test_create_member_validates_name(engine) -> None:
    engine.create_member("  Anna ", spouses=["Bob", " "])

    assert engine.store.get("Anna").spouses == ["Bob"]
    assert engine.dirty is True

    with pytest.raises(DuplicateMemberError):
        engine.create_member("Anna")
    with pytest.raises(EmptyNameError):
        engine.create_member("   ")


def test_authoring_keeps_raw_relations(engine) -> None:
    engine.create_member("Anna", spouses=["Bob"])
    engine.create_member("Bob")

    assert engine.store.get("Bob").spouses == []
    assert engine.derived_members()["Bob"].spouses == ["Anna"]


def test_update_member_with_rename(engine) -> None:
    engine.create_member("Ann")
    engine.create_member("Kid", parents=["Ann"])
    original_id = engine.store.get("Ann").id

    change = engine.update_member("Anna", original_name="Ann", spouses=["Bob"])

    assert change.renamed == [("Ann", "Anna")]
    anna = engine.store.get("Anna")
    assert anna.id == original_id
    assert anna.spouses == ["Bob"]
    assert engine.store.get("Kid").parents == ["Anna"]


def test_update_member_rejects_duplicates_and_unknowns(engine) -> None:
    engine.create_member("Anna")
    engine.create_member("Bob")

    with pytest.raises(DuplicateMemberError):
        engine.update_member("Bob", original_name="Anna")
    with pytest.raises(MemberNotFoundError):
        engine.update_member("Carl")


def test_delete_member_clears_focus(engine) -> None:
    engine.create_member("Anna")
    engine.focus("Anna")

    engine.delete_member("Anna")

    assert "Anna" not in engine.store
    assert engine.focused_member_id is None
    with pytest.raises(MemberNotFoundError):
        engine.delete_member("Anna")


def test_clear_all(family) -> None:
    change = family.clear_all()

    assert len(change.removed) == 10
    assert len(family.store) == 0
    assert family.get_all_levels() == []


def test_load_snapshot_replaces_store(family) -> None:
    text = mock_file_path("family.json").read_text(encoding="utf-8")

    family.load_snapshot(text)
    store = family.store

    assert store.names() == ["Anna", "Bob", "Carl", "Dora"]
    assert store.get("Anna").children == ["Carl", "Dora"]
    assert store.get("Dora").parents == ["Anna", "Bob"]
    assert store.get("Dora").siblings == ["Carl"]
    assert store.get("Carl").siblings == ["Dora"]
    assert store.get("Dora").level == 1
    assert family.dirty is False


def test_append_snapshot_merges(engine) -> None:
    engine.load_snapshot(mock_file_path("family.json").read_text(encoding="utf-8"))
    anna_id = engine.store.get("Anna").id

    engine.append_snapshot(json.dumps([
        {"id": anna_id, "name": "Anna", "spouses": ["Bob", "Zed"]},
        {"name": "Zed"},
    ]))

    assert engine.store.get("Anna").spouses == ["Bob", "Zed"]
    assert engine.store.get("Zed").spouses == ["Anna"]
    assert engine.store.get("Zed").level == 0
    assert engine.dirty is True


def test_bad_snapshot_leaves_store_untouched(family) -> None:
    with pytest.raises(SnapshotError):
        family.load_snapshot("not json")

    assert len(family.store) == 10


def test_export_round_trips_through_json(family) -> None:
    payload = family.export_json()

    other = FamilyTreeEngine(config=FTConfig({}))
    other.load_snapshot(payload)

    assert other.store.snapshot() == family.store.snapshot()


def test_export_text_lists_every_member(family) -> None:
    lines = family.export_text().splitlines()

    assert len(lines) == 10
    assert lines[0] == "NAME:Alice; PARENTS:Walter; SPOUSES:Henry; SIBLINGS:; CHILDREN:Ben, Clara"


def test_mark_saved_clears_dirty(family) -> None:
    family.mark_saved()

    assert family.dirty is False


def test_family_units(family) -> None:
    units = family.family_units()

    assert units[1] == [["Alice", "Henry", "Oscar"]]


def test_refresh_records_stats(engine) -> None:
    engine.import_bulk_text("NAME:A; PARENTS:Ghost\nNAME:X; PARENTS:Y\nNAME:Y; PARENTS:X")

    assert engine.ctx.stats["members"] == 3
    assert engine.ctx.stats["dangling_references"] == 1
    assert engine.ctx.stats["unassigned"] == 3


def test_drop_dangling_config() -> None:
    strict = FamilyTreeEngine(config=FTConfig({"engine": {"drop_dangling_references": True}}))

    strict.import_bulk_text("NAME:A; PARENTS:Ghost")

    assert strict.store.get("A").parents == []
