from __future__ import annotations

from typing import List, Optional

from family_tree.logging import get_logger
from family_tree.models import FamilyMember, Members

log = get_logger("level_assigner")


def _first_assigned_level(names: List[str], members: Members) -> Optional[int]:
    for name in sorted(names):
        other = members.get(name)
        if other is not None and other.level is not None:
            return other.level
    return None


def assign_levels(members: Members) -> Members:
    """
    Assign every member an absolute generation number. Roots are level 0.

    Pass 1 (parent propagation), repeated while a full scan makes progress:
      - a parentless member without a level becomes level 0
      - a member without a level takes ``parent.level + 1`` from its first
        assigned parent (parents scanned in sorted order)

    Pass 2 (lateral propagation), repeated while a full scan makes progress:
      - a member still without a level adopts the level of an assigned
        sibling, else of an assigned spouse

    Members unreachable from any root (e.g. parent cycles) keep
    ``level = None``. That is not an error. Both passes stop as soon as a
    scan assigns nothing, so they always terminate.

    Returns a new mapping; ``members`` is left untouched.
    """
    result: Members = {name: member.copy() for name, member in members.items()}
    for member in result.values():
        member.level = None

    ordered: List[FamilyMember] = [result[n] for n in sorted(result)]
    total = len(ordered)
    assigned = 0

    # Pass 1: parent/child propagation
    changed = True
    while changed and assigned < total:
        changed = False
        for member in ordered:
            if member.level is not None:
                continue
            if not member.parents:
                member.level = 0
            else:
                parent_level = _first_assigned_level(member.parents, result)
                if parent_level is None:
                    continue
                member.level = parent_level + 1
            changed = True
            assigned += 1

    # Pass 2: fill remaining gaps from siblings, then spouses
    changed = True
    while changed:
        changed = False
        for member in ordered:
            if member.level is not None:
                continue
            level = _first_assigned_level(member.siblings, result)
            if level is None:
                level = _first_assigned_level(member.spouses, result)
            if level is None:
                continue
            member.level = level
            changed = True
            assigned += 1

    if assigned < total:
        log.debug(
            "Level assignment left %d of %d members unassigned",
            total - assigned,
            total,
        )
    return result


def unassigned_names(members: Members) -> List[str]:
    return sorted(name for name, m in members.items() if m.level is None)
