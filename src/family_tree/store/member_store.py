from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from family_tree.logging import get_logger
from family_tree.models import (
    RELATION_FIELDS,
    FamilyMember,
    Members,
    StoreChange,
    copy_members,
)

log = get_logger("member_store")


class MemberStore:
    """
    Name-keyed store of FamilyMember records.

    The store is the only owner of member records. It is meant to be used
    from a single thread; callers re-read records by name after any
    mutation instead of holding on to them.

    Name uniqueness is a precondition here. Validation of user edits
    (blank names, duplicates) happens in the engine before calling in.
    """

    def __init__(self, members: Optional[Members] = None):
        self._members: Dict[str, FamilyMember] = dict(members or {})

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[FamilyMember]:
        return iter(self._members.values())

    def get(self, name: str) -> Optional[FamilyMember]:
        return self._members.get(name)

    def get_by_id(self, member_id: str) -> Optional[FamilyMember]:
        for member in self._members.values():
            if member.id == member_id:
                return member
        return None

    def names(self) -> List[str]:
        return sorted(self._members)

    def snapshot(self) -> Members:
        """Deep copy of the current mapping."""
        return copy_members(self._members)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, member: FamilyMember) -> StoreChange:
        self._members[member.name] = member
        return StoreChange(added=[member.name])

    def put(self, member: FamilyMember) -> StoreChange:
        """Insert or replace the record stored under ``member.name``."""
        existed = member.name in self._members
        self._members[member.name] = member
        if existed:
            return StoreChange(updated=[member.name])
        return StoreChange(added=[member.name])

    def remove(self, name: str) -> StoreChange:
        """
        Drop a record. References to it held by other members are left in
        place and become dangling until the next normalization.
        """
        if self._members.pop(name, None) is None:
            return StoreChange()
        return StoreChange(removed=[name])

    def rename(self, old: str, new: str) -> StoreChange:
        """
        Re-key ``old`` as ``new`` and rewrite every relation list that
        mentions ``old``.
        """
        member = self._members.pop(old, None)
        if member is None or old == new:
            if member is not None:
                self._members[old] = member
            return StoreChange()

        member.name = new
        self._members[new] = member

        touched = []
        for other in self._members.values():
            changed = False
            for rel in RELATION_FIELDS:
                values = getattr(other, rel)
                if old in values:
                    setattr(other, rel, [new if v == old else v for v in values])
                    changed = True
            if changed and other.name != new:
                touched.append(other.name)

        log.debug("Renamed %r -> %r (%d references rewritten)", old, new, len(touched))
        return StoreChange(updated=sorted(touched), renamed=[(old, new)])

    def clear(self) -> StoreChange:
        removed = sorted(self._members)
        self._members.clear()
        return StoreChange(removed=removed)

    def replace_all(self, members: Members) -> StoreChange:
        """Swap the whole mapping, reporting the difference by name."""
        before = set(self._members)
        after = set(members)
        self._members = dict(members)
        return StoreChange(
            added=sorted(after - before),
            updated=sorted(after & before),
            removed=sorted(before - after),
        )
