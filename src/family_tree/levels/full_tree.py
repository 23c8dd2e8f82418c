from __future__ import annotations

from typing import Dict, List, Set, Tuple

from family_tree.levels.display import group_levels
from family_tree.models import FamilyMember, LevelGroup, Members


def descend_from_roots(members: Members) -> Dict[str, int]:
    """
    Levels found by walking down from every parentless member.

    Roots are visited in name order. From each member, spouses are placed
    on its level before children are placed one level below; the first
    level a member is reached at wins. Stored ``level`` fields are ignored.
    Members not reachable from a root are absent from the result.
    """
    levels: Dict[str, int] = {}
    roots = [name for name in sorted(members) if not members[name].parents]

    for root in roots:
        stack: List[Tuple[str, int]] = [(root, 0)]
        while stack:
            name, level = stack.pop()
            if name in levels:
                continue
            member = members.get(name)
            if member is None:
                continue
            levels[name] = level

            # Pushed in reverse so pops follow spouse-first, list order.
            for child_name in reversed(member.children):
                if child_name not in levels:
                    stack.append((child_name, level + 1))
            for spouse_name in reversed(member.spouses):
                if spouse_name not in levels:
                    stack.append((spouse_name, level))

    return levels


def get_all_levels(members: Members) -> List[LevelGroup]:
    """Level groups for the full tree, built by descending from the roots."""
    levels = descend_from_roots(members)
    display: List[FamilyMember] = []
    for name in sorted(levels):
        member = members[name].copy()
        member.level = levels[name]
        display.append(member)
    return group_levels(display)


def unreachable_names(members: Members) -> Set[str]:
    return set(members) - set(descend_from_roots(members))
