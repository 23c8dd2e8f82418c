from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from family_tree.models import FamilyMember, LevelGroup
from family_tree.relations.siblings import parent_signature


def sort_level(
    members: Sequence[FamilyMember],
    focus_name: Optional[str] = None,
) -> List[FamilyMember]:
    """
    Order one level's members for rendering.

    1. The focus (when present on this level) followed by its spouses, in
       spouse-list order.
    2. Couples: remaining members with a spouse on this level, taken in
       name order, each followed by its spouses found here.
    3. Everyone else, grouped by parent signature (groups in signature
       order, names sorted inside each group).

    Pure function of the member list and the focus name.
    """
    remaining: Dict[str, FamilyMember] = {m.name: m for m in members}
    ordered: List[FamilyMember] = []

    def take_spouses(member: FamilyMember) -> None:
        for spouse_name in member.spouses:
            spouse = remaining.pop(spouse_name, None)
            if spouse is not None:
                ordered.append(spouse)

    # Step 1: focus and spouses
    if focus_name is not None and focus_name in remaining:
        focus = remaining.pop(focus_name)
        ordered.append(focus)
        take_spouses(focus)

    # Step 2: couples
    married = sorted(
        (m for m in remaining.values() if any(s in remaining for s in m.spouses)),
        key=lambda m: m.name,
    )
    for member in married:
        if member.name not in remaining:
            continue
        ordered.append(remaining.pop(member.name))
        take_spouses(member)

    # Step 3: sibling groups
    groups: Dict[str, List[FamilyMember]] = defaultdict(list)
    for member in remaining.values():
        groups[parent_signature(member)].append(member)
    for signature in sorted(groups):
        ordered.extend(sorted(groups[signature], key=lambda m: m.name))

    return ordered


def group_levels(
    members: Iterable[FamilyMember],
    focus_name: Optional[str] = None,
) -> List[LevelGroup]:
    """
    Bucket members by their ``level`` and sort each bucket for display.
    Members without a level are left out.
    """
    buckets: Dict[int, List[FamilyMember]] = defaultdict(list)
    for member in members:
        if member.level is not None:
            buckets[member.level].append(member)

    return [
        LevelGroup(level=level, members=sort_level(buckets[level], focus_name))
        for level in sorted(buckets)
    ]
