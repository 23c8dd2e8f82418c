# tests/helpers.py

from __future__ import annotations

from family_tree.models import FamilyMember, Members


def make_member(name, parents=None, spouses=None, children=None, siblings=None, **kwargs):
    return FamilyMember(
        name=name,
        parents=list(parents or []),
        spouses=list(spouses or []),
        children=list(children or []),
        siblings=list(siblings or []),
        **kwargs,
    )


def members_of(*members: FamilyMember) -> Members:
    return {m.name: m for m in members}
