from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Tuple

from family_tree.models import Members

# Level offset applied when following each relation from a member.
RELATION_STEPS: Tuple[Tuple[str, int], ...] = (
    ("parents", -1),
    ("children", 1),
    ("siblings", 0),
    ("spouses", 0),
)


def compute_relative_levels(start: str, members: Members) -> Dict[str, int]:
    """
    Breadth-first levels relative to ``start`` (which is level 0).

    Parents are one level up (-1), children one level down (+1), siblings
    and spouses on the same level. Every name is enqueued at most once, so
    the first level found wins and cycles cannot loop forever.

    Levels may be negative; callers shift them by the minimum they use.
    Names referenced but absent from ``members`` receive a level but are
    not expanded further.
    """
    levels: Dict[str, int] = {start: 0}
    queue: Deque[Tuple[str, int]] = deque([(start, 0)])

    while queue:
        name, level = queue.popleft()
        member = members.get(name)
        if member is None:
            continue

        for relation, step in RELATION_STEPS:
            for other in getattr(member, relation):
                if other in levels:
                    continue
                levels[other] = level + step
                queue.append((other, level + step))

    return levels
