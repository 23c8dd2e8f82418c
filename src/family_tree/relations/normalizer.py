from __future__ import annotations

from typing import List

from family_tree.logging import get_logger
from family_tree.models import RELATION_FIELDS, FamilyMember, Members, copy_members

log = get_logger("normalizer")


def _add_unique(name: str, values: List[str]) -> None:
    if name not in values:
        values.append(name)


def _clean(values: List[str], own_name: str) -> List[str]:
    return sorted({v for v in values if v and v != own_name})


def dedupe_relations(members: Members, *, drop_dangling: bool = False) -> Members:
    """
    Deduplicate and alphabetically sort all four relation lists of every
    member, removing self-references.

    With ``drop_dangling`` names that are not in ``members`` are removed too.
    """
    result = copy_members(members)
    for name, member in result.items():
        for rel in RELATION_FIELDS:
            values = _clean(getattr(member, rel), name)
            if drop_dangling:
                values = [v for v in values if v in result]
            setattr(member, rel, values)
    return result


def count_dangling(members: Members) -> int:
    return sum(
        1
        for member in members.values()
        for rel in RELATION_FIELDS
        for v in getattr(member, rel)
        if v not in members
    )


def normalize_relations(members: Members, *, drop_dangling: bool = False) -> Members:
    """
    Make every relation edge symmetric, deduplicated and self-reference free.

    Pure: returns a new mapping and leaves ``members`` untouched.

    Rules (each edge is read from the input and mirrored onto the copy):
      - A lists S as spouse    -> S lists A as spouse
      - A lists P as parent    -> P lists A as child
      - A lists C as child     -> C lists A as parent
      - A lists S as sibling   -> S lists A as sibling (S != A)

    Edges naming an absent member are not mirrored. They stay on the
    member that authored them unless ``drop_dangling`` is set.

    Idempotent: normalizing a normalized mapping changes nothing.
    """
    updated = copy_members(members)
    ordered: List[FamilyMember] = [members[n] for n in sorted(members)]

    # 1) Mutual spouses
    for member in ordered:
        for spouse_name in member.spouses:
            spouse = updated.get(spouse_name)
            if spouse is not None:
                _add_unique(member.name, spouse.spouses)

    # 2) Parent/child consistency
    for member in ordered:
        for parent_name in member.parents:
            parent = updated.get(parent_name)
            if parent is not None:
                _add_unique(member.name, parent.children)
        for child_name in member.children:
            child = updated.get(child_name)
            if child is not None:
                _add_unique(member.name, child.parents)

    # 3) Mutual siblings (no self)
    for member in ordered:
        for sibling_name in member.siblings:
            if sibling_name == member.name:
                continue
            sibling = updated.get(sibling_name)
            if sibling is not None:
                _add_unique(member.name, sibling.siblings)

    # 4) Deduplicate and sort for stability
    result = dedupe_relations(updated, drop_dangling=drop_dangling)

    log.debug(
        "Normalized %d members (%d dangling references%s)",
        len(result),
        count_dangling(updated),
        ", dropped" if drop_dangling else "",
    )
    return result
