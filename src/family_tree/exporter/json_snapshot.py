"""
json_snapshot.py
JSON snapshot reader/writer for the member store.

Wire format: a JSON array of member objects with the keys
``id, name, gender, imageName, parents, spouses, children, siblings,
isImplicit, level``. An unassigned level is written as ``-1``.

This module:
- Converts members to plain dicts (NOT strings) before dumping
- Tolerates missing optional keys and skips records without a name
- Implements the "load" (replace) and "append" (merge by id) semantics
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from family_tree.core.exceptions import SnapshotError
from family_tree.identity.member_ids import new_member_id, normalize_member_id
from family_tree.logging import get_logger
from family_tree.models import RELATION_FIELDS, FamilyMember, Members, StoreChange

log = get_logger("json_snapshot")

UNASSIGNED_WIRE_LEVEL = -1


# ----------------------------------------------------------------------
# Member <-> dict
# ----------------------------------------------------------------------

def member_to_dict(member: FamilyMember) -> Dict[str, Any]:
    return {
        "id": member.id,
        "name": member.name,
        "gender": member.gender,
        "imageName": member.image_reference,
        "parents": list(member.parents),
        "spouses": list(member.spouses),
        "children": list(member.children),
        "siblings": list(member.siblings),
        "isImplicit": member.is_implicit,
        "level": UNASSIGNED_WIRE_LEVEL if member.level is None else member.level,
    }


def _name_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


def member_from_dict(data: Dict[str, Any]) -> Optional[FamilyMember]:
    """
    Build a FamilyMember from one snapshot record.

    Returns None when the record has no usable name.
    """
    name = str(data.get("name") or "").strip()
    if not name:
        return None

    level = data.get("level")
    if not isinstance(level, int) or isinstance(level, bool) or level < 0:
        level = None

    return FamilyMember(
        name=name,
        id=normalize_member_id(data.get("id")) or new_member_id(),
        gender=_optional_str(data.get("gender")),
        image_reference=_optional_str(data.get("imageName")),
        parents=_name_list(data.get("parents")),
        spouses=_name_list(data.get("spouses")),
        children=_name_list(data.get("children")),
        siblings=_name_list(data.get("siblings")),
        is_implicit=bool(data.get("isImplicit", False)),
        level=level,
    )


# ----------------------------------------------------------------------
# Serialization
# ----------------------------------------------------------------------

def serialize_snapshot(members: Members, pretty: bool = False) -> str:
    """Members in name order, as a JSON array."""
    payload = [member_to_dict(members[name]) for name in sorted(members)]
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def parse_snapshot(text: str) -> List[FamilyMember]:
    """
    Decode a snapshot into members, in file order.

    Raises SnapshotError when the text is not JSON or not an array.
    Non-object entries and nameless records are skipped with a warning.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise SnapshotError("Snapshot must be a JSON array of members")

    members: List[FamilyMember] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            log.warning("Snapshot entry %d is not an object, skipped", index)
            continue
        member = member_from_dict(record)
        if member is None:
            log.warning("Snapshot entry %d has no name, skipped", index)
            continue
        members.append(member)

    return members


def read_snapshot(path: str | Path) -> List[FamilyMember]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc

    members = parse_snapshot(text)
    log.info("Read %d members from snapshot: %s", len(members), path)
    return members


def write_snapshot(members: Members, path: str | Path, pretty: bool = True) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        f.write(serialize_snapshot(members, pretty=pretty))

    log.info("Snapshot written: %s (%d members, %d bytes)", path, len(members), path.stat().st_size)


# ----------------------------------------------------------------------
# Load / append semantics
# ----------------------------------------------------------------------

def members_from_snapshot(imported: List[FamilyMember]) -> Members:
    """
    "Load" semantics: deduplicate by id (last one wins), then key by name
    (a later record wins a name collision).
    """
    by_id: Dict[str, FamilyMember] = {}
    for member in imported:
        if member.id in by_id:
            log.warning("Duplicate id %s in snapshot, keeping the later record", member.id)
        by_id[member.id] = member

    result: Members = {}
    for member in by_id.values():
        if member.name in result:
            log.warning("Duplicate name %r in snapshot, keeping the later record", member.name)
        result[member.name] = member
    return result


def _union(target: List[str], extra: List[str]) -> List[str]:
    merged = list(target)
    for name in extra:
        if name not in merged:
            merged.append(name)
    return merged


def append_snapshot(members: Members, imported: List[FamilyMember]) -> StoreChange:
    """
    "Append" semantics, applied to ``members`` in place.

    A record matching an existing id is merged into it: relation lists
    become the union and the imported name wins. A record whose id is new
    but whose name is taken is merged into that member by name (keeping
    its id). Anything else is added.
    """
    change = StoreChange()

    for incoming in imported:
        existing = next((m for m in members.values() if m.id == incoming.id), None)
        if existing is None:
            existing = members.get(incoming.name)

        if existing is None:
            members[incoming.name] = incoming
            change.added.append(incoming.name)
            continue

        old_name = existing.name
        for rel in RELATION_FIELDS:
            setattr(existing, rel, _union(getattr(existing, rel), getattr(incoming, rel)))
        existing.gender = incoming.gender or existing.gender
        existing.image_reference = incoming.image_reference or existing.image_reference

        if incoming.name != old_name and existing.id == incoming.id:
            displaced = members.pop(incoming.name, None)
            if displaced is not None:
                log.warning(
                    "Appending %r replaced a different member with the same name",
                    incoming.name,
                )
                change.removed.append(incoming.name)
            del members[old_name]
            existing.name = incoming.name
            members[incoming.name] = existing
            change.renamed.append((old_name, incoming.name))
        else:
            change.updated.append(existing.name)

    return change
