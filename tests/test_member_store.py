# tests/test_member_store.py

from __future__ import annotations

from helpers import make_member

from family_tree.store import MemberStore


def test_store_add_get_and_lookup_by_id() -> None:
    store = MemberStore()
    anna = make_member("Anna")

    change = store.add(anna)

    assert change.added == ["Anna"]
    assert store.get("Anna") is anna
    assert store.get_by_id(anna.id) is anna
    assert store.get_by_id("missing") is None
    assert "Anna" in store
    assert len(store) == 1


def test_put_reports_added_then_updated() -> None:
    store = MemberStore()

    assert store.put(make_member("Anna")).added == ["Anna"]
    assert store.put(make_member("Anna", spouses=["Bob"])).updated == ["Anna"]
    assert store.get("Anna").spouses == ["Bob"]


def test_remove_leaves_references_dangling() -> None:
    store = MemberStore()
    store.add(make_member("Anna", spouses=["Bob"]))
    store.add(make_member("Bob", spouses=["Anna"]))

    change = store.remove("Bob")

    assert change.removed == ["Bob"]
    assert store.get("Anna").spouses == ["Bob"]
    assert store.remove("Bob").is_empty


def test_rename_rekeys_and_rewrites_references() -> None:
    store = MemberStore()
    kid = make_member("Kid", parents=["Ann"])
    store.add(make_member("Ann", children=["Kid"]))
    store.add(kid)

    change = store.rename("Ann", "Anna")

    assert change.renamed == [("Ann", "Anna")]
    assert change.updated == ["Kid"]
    assert "Ann" not in store
    assert store.get("Anna").name == "Anna"
    assert store.get("Kid").parents == ["Anna"]


def test_rename_unknown_or_same_name_is_noop() -> None:
    store = MemberStore()
    store.add(make_member("Anna"))

    assert store.rename("Nobody", "Someone").is_empty
    assert store.rename("Anna", "Anna").is_empty
    assert store.names() == ["Anna"]


def test_snapshot_is_deep_copy() -> None:
    store = MemberStore()
    store.add(make_member("Anna"))

    snap = store.snapshot()
    snap["Anna"].spouses.append("Bob")

    assert store.get("Anna").spouses == []


def test_clear_and_replace_all() -> None:
    store = MemberStore()
    store.add(make_member("Anna"))
    store.add(make_member("Bob"))

    change = store.replace_all({"Bob": make_member("Bob"), "Carl": make_member("Carl")})
    assert change.added == ["Carl"]
    assert change.updated == ["Bob"]
    assert change.removed == ["Anna"]

    cleared = store.clear()
    assert cleared.removed == ["Bob", "Carl"]
    assert len(store) == 0
