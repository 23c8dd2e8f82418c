from __future__ import annotations

from collections import defaultdict, deque
from typing import Dict, List, Set

from family_tree.models import Members


def group_family_units(members: Members) -> Dict[int, List[List[str]]]:
    """
    For each assigned level, split its members into units linked through
    spouse or sibling edges on that same level.

    Units are sorted by name and listed in order of their first name.
    Members without a level are skipped.
    """
    by_level: Dict[int, List[str]] = defaultdict(list)
    for name, member in members.items():
        if member.level is not None:
            by_level[member.level].append(name)

    units_by_level: Dict[int, List[List[str]]] = {}
    for level in sorted(by_level):
        processed: Set[str] = set()
        units: List[List[str]] = []

        for name in sorted(by_level[level]):
            if name in processed:
                continue
            unit = {name}
            processed.add(name)
            queue = deque([name])

            while queue:
                current = members[queue.popleft()]
                for other in current.spouses + current.siblings:
                    partner = members.get(other)
                    if partner is None or partner.level != level or other in unit:
                        continue
                    unit.add(other)
                    processed.add(other)
                    queue.append(other)

            units.append(sorted(unit))

        units_by_level[level] = units

    return units_by_level
