from family_tree.relations.normalizer import (
    count_dangling,
    dedupe_relations,
    normalize_relations,
)
from family_tree.relations.siblings import (
    group_by_parents,
    infer_siblings,
    parent_signature,
)

__all__ = [
    "count_dangling",
    "dedupe_relations",
    "group_by_parents",
    "infer_siblings",
    "normalize_relations",
    "parent_signature",
]
