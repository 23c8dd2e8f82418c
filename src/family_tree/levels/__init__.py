"""
Level computation and display grouping.

Absolute levels come from ``assign_levels``. Rendered views come from
``get_all_levels`` (full tree) and ``get_connected_family_of`` (focused
neighborhood), both returning ordered ``LevelGroup`` lists.
"""

from family_tree.levels.assigner import assign_levels, unassigned_names
from family_tree.levels.display import group_levels, sort_level
from family_tree.levels.family_units import group_family_units
from family_tree.levels.full_tree import (
    descend_from_roots,
    get_all_levels,
    unreachable_names,
)
from family_tree.levels.relative import compute_relative_levels
from family_tree.levels.subgraph import (
    MAX_ANCESTOR_DEPTH,
    collect_connected_names,
    find_member_by_id,
    get_connected_family_of,
)

__all__ = [
    "MAX_ANCESTOR_DEPTH",
    "assign_levels",
    "collect_connected_names",
    "compute_relative_levels",
    "descend_from_roots",
    "find_member_by_id",
    "get_all_levels",
    "get_connected_family_of",
    "group_family_units",
    "group_levels",
    "sort_level",
    "unassigned_names",
    "unreachable_names",
]
