from __future__ import annotations

from typing import List, Optional, Set

from family_tree.levels.display import group_levels
from family_tree.levels.relative import compute_relative_levels
from family_tree.logging import get_logger
from family_tree.models import FamilyMember, LevelGroup, Members

log = get_logger("subgraph")

# Generations shown above the focus (parents and grandparents).
MAX_ANCESTOR_DEPTH = 2


def find_member_by_id(members: Members, member_id: str) -> Optional[FamilyMember]:
    for member in members.values():
        if member.id == member_id:
            return member
    return None


def collect_connected_names(
    focus: FamilyMember,
    members: Members,
    max_ancestor_depth: int = MAX_ANCESTOR_DEPTH,
) -> Set[str]:
    """
    Names visible around ``focus``:
      - the focus, its spouses and siblings
      - ancestors up to ``max_ancestor_depth`` generations, with their spouses
      - every descendant at any depth, with their spouses
    """
    names: Set[str] = {focus.name}
    names.update(focus.spouses)
    names.update(focus.siblings)

    # Ancestors, breadth-first, depth-limited
    current: List[str] = list(focus.parents)
    visited_ancestors: Set[str] = set(current)
    depth = 0
    while current and depth < max_ancestor_depth:
        following: List[str] = []
        for ancestor_name in current:
            names.add(ancestor_name)
            ancestor = members.get(ancestor_name)
            if ancestor is None:
                continue
            names.update(ancestor.spouses)
            for parent_name in ancestor.parents:
                if parent_name not in visited_ancestors:
                    visited_ancestors.add(parent_name)
                    following.append(parent_name)
        current = following
        depth += 1

    # Descendants, unbounded, explicit worklist
    visited_descendants: Set[str] = set()
    stack: List[str] = [focus.name]
    while stack:
        member = members.get(stack.pop())
        if member is None:
            continue
        for child_name in member.children:
            if child_name in visited_descendants:
                continue
            visited_descendants.add(child_name)
            names.add(child_name)
            child = members.get(child_name)
            if child is not None:
                names.update(child.spouses)
                stack.append(child_name)

    return names


def get_connected_family_of(
    members: Members,
    focus_id: str,
    max_ancestor_depth: int = MAX_ANCESTOR_DEPTH,
) -> List[LevelGroup]:
    """
    Level groups for the bounded neighborhood of the member with ``focus_id``.

    Levels are relative to the focus and shifted so the topmost shown
    generation is 0. Returned members are copies carrying that display
    level; ``members`` is not modified. An unknown id yields ``[]``.
    """
    focus = find_member_by_id(members, focus_id)
    if focus is None:
        log.warning("Focused member with id %s not found", focus_id)
        return []

    names = collect_connected_names(focus, members, max_ancestor_depth)
    relative = compute_relative_levels(focus.name, members)

    relevant = sorted(n for n in names if n in relative and n in members)
    dropped = len(names) - len(relevant)
    if dropped:
        log.debug("Discarded %d names with no member or relative level", dropped)

    min_level = min((relative[n] for n in relevant), default=0)
    shift = -min_level if min_level < 0 else 0

    display: List[FamilyMember] = []
    for name in relevant:
        member = members[name].copy()
        member.level = relative[name] + shift
        display.append(member)

    return group_levels(display, focus_name=focus.name)
