from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from family_tree.identity.member_ids import new_member_id

RELATION_FIELDS: Tuple[str, ...] = ("parents", "spouses", "children", "siblings")


@dataclass(slots=True)
class FamilyMember:
    """
    One person in the family graph.

    ``name`` is the primary key inside a MemberStore. Relation lists hold
    member names, never object references. ``level`` is ``None`` until the
    level assigner (or a view builder) gives the member a generation.
    """
    name: str
    id: str = field(default_factory=new_member_id)
    gender: Optional[str] = None
    image_reference: Optional[str] = None

    parents: List[str] = field(default_factory=list)
    spouses: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)
    siblings: List[str] = field(default_factory=list)

    is_implicit: bool = False
    level: Optional[int] = None

    @property
    def has_level(self) -> bool:
        return self.level is not None

    def relations(self) -> Dict[str, List[str]]:
        return {rel: getattr(self, rel) for rel in RELATION_FIELDS}

    def copy(self) -> "FamilyMember":
        return FamilyMember(
            name=self.name,
            id=self.id,
            gender=self.gender,
            image_reference=self.image_reference,
            parents=list(self.parents),
            spouses=list(self.spouses),
            children=list(self.children),
            siblings=list(self.siblings),
            is_implicit=self.is_implicit,
            level=self.level,
        )


# Name-keyed mapping every graph algorithm reads and returns.
Members = Dict[str, FamilyMember]


@dataclass(slots=True)
class LevelGroup:
    """Members sharing one level, already in display order."""
    level: int
    members: List[FamilyMember] = field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [m.name for m in self.members]


@dataclass(slots=True)
class StoreChange:
    """
    Change notification returned by every MemberStore mutation.

    ``renamed`` holds ``(old, new)`` pairs.
    """
    added: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    renamed: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.updated or self.removed or self.renamed)

    def merge(self, other: "StoreChange") -> "StoreChange":
        self.added.extend(other.added)
        self.updated.extend(other.updated)
        self.removed.extend(other.removed)
        self.renamed.extend(other.renamed)
        return self


def copy_members(members: Members) -> Members:
    return {name: member.copy() for name, member in members.items()}
