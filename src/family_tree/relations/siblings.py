from __future__ import annotations

from collections import defaultdict
from typing import Dict, List

from family_tree.logging import get_logger
from family_tree.models import FamilyMember, Members
from family_tree.relations.normalizer import dedupe_relations

log = get_logger("siblings")

PARENT_SIGNATURE_SEPARATOR = "|"


def parent_signature(member: FamilyMember) -> str:
    """Grouping key shared by sibling inference and display sorting."""
    return PARENT_SIGNATURE_SEPARATOR.join(sorted(member.parents))


def group_by_parents(members: Members) -> Dict[str, List[str]]:
    """
    Map each non-empty parent signature to the sorted names sharing it.
    Parentless members are never grouped.
    """
    groups: Dict[str, List[str]] = defaultdict(list)
    for name in sorted(members):
        member = members[name]
        if member.parents:
            groups[parent_signature(member)].append(name)
    return dict(groups)


def infer_siblings(members: Members) -> Members:
    """
    Add sibling edges between members with an identical, non-empty parent
    set. Additive only: existing siblings are kept.

    Returns a new, deduplicated mapping.
    """
    result: Members = {name: member.copy() for name, member in members.items()}
    added = 0

    for names in group_by_parents(members).values():
        if len(names) < 2:
            continue
        for name in names:
            member = result[name]
            existing = set(member.siblings)
            for other in names:
                if other != name and other not in existing:
                    member.siblings.append(other)
                    existing.add(other)
                    added += 1

    log.debug("Inferred %d sibling edges", added)
    return dedupe_relations(result)
