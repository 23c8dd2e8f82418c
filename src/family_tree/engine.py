"""
Family tree engine facade.

Owns one MemberStore (through an EngineContext) and exposes the operations
an editor or renderer needs:

- authoring: create / update / rename / delete / clear
- imports: bulk text, JSON snapshot load and append
- exports: bulk text and JSON snapshot
- views: full tree and focused neighborhood as ordered LevelGroups

The engine is confined to one thread. Every algorithm runs on a snapshot
of the store and the result is written back as a whole.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from family_tree.config import FTConfig, get_config
from family_tree.core.context import EngineContext
from family_tree.core.exceptions import (
    DuplicateMemberError,
    EmptyNameError,
    MemberNotFoundError,
)
from family_tree.core.pipeline import RefreshPipeline
from family_tree.exporter.json_snapshot import (
    append_snapshot,
    members_from_snapshot,
    parse_snapshot,
    serialize_snapshot,
)
from family_tree.exporter.text_exporter import generate_export_text
from family_tree.levels.assigner import assign_levels
from family_tree.levels.family_units import group_family_units
from family_tree.levels.full_tree import get_all_levels
from family_tree.levels.subgraph import get_connected_family_of
from family_tree.loader.bulk_text import merge_bulk_records, parse_bulk_text
from family_tree.logging import get_logger
from family_tree.models import FamilyMember, LevelGroup, Members, StoreChange
from family_tree.relations.normalizer import normalize_relations
from family_tree.relations.siblings import infer_siblings
from family_tree.store.member_store import MemberStore


def _clean_names(values: Optional[Iterable[str]]) -> List[str]:
    if values is None:
        return []
    return [v.strip() for v in values if v and v.strip()]


class FamilyTreeEngine:
    def __init__(self, config: Optional[FTConfig] = None, store: Optional[MemberStore] = None):
        self.ctx = EngineContext(
            config=config or get_config(),
            logger=get_logger("engine"),
            store=store if store is not None else MemberStore(),
        )
        self.log = self.ctx.logger

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def store(self) -> MemberStore:
        return self.ctx.store

    @property
    def dirty(self) -> bool:
        return self.ctx.dirty

    @property
    def focused_member_id(self) -> Optional[str]:
        return self.ctx.focused_member_id

    def mark_saved(self) -> None:
        self.ctx.dirty = False

    def _touch(self, change: StoreChange) -> StoreChange:
        if not change.is_empty:
            self.ctx.dirty = True
        return change

    def refresh(self, infer: bool = False) -> None:
        """Normalize relations and reassign levels on the authored store."""
        RefreshPipeline(self.ctx).run(infer=infer)

    # ------------------------------------------------------------------
    # Authoring (edit boundary)
    # ------------------------------------------------------------------

    def _require(self, name: str) -> FamilyMember:
        member = self.store.get(name)
        if member is None:
            raise MemberNotFoundError(f"No member named {name!r}")
        return member

    def create_member(
        self,
        name: str,
        *,
        parents: Optional[Iterable[str]] = None,
        spouses: Optional[Iterable[str]] = None,
        children: Optional[Iterable[str]] = None,
        siblings: Optional[Iterable[str]] = None,
        gender: Optional[str] = None,
        image_reference: Optional[str] = None,
    ) -> StoreChange:
        name = (name or "").strip()
        if not name:
            raise EmptyNameError("Member name must not be empty")
        if name in self.store:
            raise DuplicateMemberError(f"A member named {name!r} already exists")

        member = FamilyMember(
            name=name,
            gender=gender,
            image_reference=image_reference,
            parents=_clean_names(parents),
            spouses=_clean_names(spouses),
            children=_clean_names(children),
            siblings=_clean_names(siblings),
        )
        self.log.info("Created member %r", name)
        return self._touch(self.store.add(member))

    def update_member(
        self,
        name: str,
        *,
        original_name: Optional[str] = None,
        parents: Optional[Iterable[str]] = None,
        spouses: Optional[Iterable[str]] = None,
        children: Optional[Iterable[str]] = None,
        siblings: Optional[Iterable[str]] = None,
        gender: Optional[str] = None,
        image_reference: Optional[str] = None,
    ) -> StoreChange:
        """
        Replace the authored relation lists of a member. Lists passed as
        None are left as they are. A differing ``original_name`` renames the
        member first; references held by others follow the rename.
        """
        name = (name or "").strip()
        if not name:
            raise EmptyNameError("Member name must not be empty")

        current = (original_name or name).strip()
        self._require(current)

        change = StoreChange()
        if current != name:
            if name in self.store:
                raise DuplicateMemberError(f"A member named {name!r} already exists")
            change.merge(self.store.rename(current, name))
            self.log.info("Renamed member %r -> %r", current, name)

        member = self._require(name)
        for rel, values in (
            ("parents", parents),
            ("spouses", spouses),
            ("children", children),
            ("siblings", siblings),
        ):
            if values is not None:
                setattr(member, rel, _clean_names(values))
        if gender is not None:
            member.gender = gender or None
        if image_reference is not None:
            member.image_reference = image_reference or None

        if name not in change.updated:
            change.updated.append(name)
        return self._touch(change)

    def delete_member(self, name: str) -> StoreChange:
        member = self._require(name)
        if member.id == self.ctx.focused_member_id:
            self.ctx.focused_member_id = None
        self.log.info("Deleted member %r", name)
        return self._touch(self.store.remove(name))

    def clear_all(self) -> StoreChange:
        self.ctx.focused_member_id = None
        return self._touch(self.store.clear())

    # ------------------------------------------------------------------
    # Imports
    # ------------------------------------------------------------------

    def import_bulk_text(self, text: str) -> StoreChange:
        """Merge bulk text into the store (set union), then refresh."""
        records = list(parse_bulk_text(text))
        members = self.store.snapshot()
        change = merge_bulk_records(members, records)
        self.store.replace_all(members)
        self.refresh()

        self.log.info(
            "Bulk import: %d records (%d added, %d updated)",
            len(records),
            len(change.added),
            len(change.updated),
        )
        return self._touch(change)

    def load_snapshot(self, text: str) -> StoreChange:
        """Replace the whole store with a JSON snapshot, then refresh."""
        imported = parse_snapshot(text)
        change = self.store.replace_all(members_from_snapshot(imported))
        self._invalidate_levels()
        self.refresh()

        self.ctx.focused_member_id = None
        self.ctx.dirty = False
        self.log.info("Loaded snapshot with %d members", len(self.store))
        return change

    def append_snapshot(self, text: str) -> StoreChange:
        """Merge a JSON snapshot into the store by id, then refresh."""
        imported = parse_snapshot(text)
        members = self.store.snapshot()
        change = append_snapshot(members, imported)
        self.store.replace_all(members)
        self._invalidate_levels()
        self.refresh()

        self.log.info("Appended snapshot with %d records", len(imported))
        return self._touch(change)

    def _invalidate_levels(self) -> None:
        for member in self.store:
            member.level = None

    # ------------------------------------------------------------------
    # Exports
    # ------------------------------------------------------------------

    def export_text(self) -> str:
        return generate_export_text(self.store.snapshot())

    def export_json(self, pretty: bool = False) -> str:
        return serialize_snapshot(self.store.snapshot(), pretty=pretty)

    # ------------------------------------------------------------------
    # Focus
    # ------------------------------------------------------------------

    def focus(self, name: str) -> str:
        member = self._require(name)
        self.ctx.focused_member_id = member.id
        return member.id

    def clear_focus(self) -> None:
        self.ctx.focused_member_id = None

    # ------------------------------------------------------------------
    # Views (pure functions of the current store)
    # ------------------------------------------------------------------

    def derived_members(self, apply_sibling_inference: Optional[bool] = None) -> Members:
        """
        Display copy of the authored store: normalized, optionally with
        inferred siblings, deduplicated again. The store is not modified.
        """
        if apply_sibling_inference is None:
            apply_sibling_inference = self.ctx.config.infer_siblings_for_display

        members = normalize_relations(
            self.store.snapshot(),
            drop_dangling=self.ctx.config.drop_dangling_references,
        )
        if apply_sibling_inference:
            members = infer_siblings(members)
        return members

    def get_all_levels(self) -> List[LevelGroup]:
        return get_all_levels(self.derived_members())

    def get_connected_family_of(self, focus_id: str) -> List[LevelGroup]:
        return get_connected_family_of(self.derived_members(), focus_id)

    def current_levels(self) -> List[LevelGroup]:
        """Focused neighborhood when a focus is set, full tree otherwise."""
        if self.ctx.focused_member_id is not None:
            return self.get_connected_family_of(self.ctx.focused_member_id)
        return self.get_all_levels()

    def family_units(self) -> Dict[int, List[List[str]]]:
        return group_family_units(assign_levels(self.derived_members()))
