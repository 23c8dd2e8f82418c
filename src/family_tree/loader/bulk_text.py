# src/family_tree/loader/bulk_text.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from family_tree.logging import get_logger
from family_tree.models import RELATION_FIELDS, FamilyMember, Members, StoreChange

log = get_logger("bulk_text")

FIELD_SEPARATOR = ";"
LIST_SEPARATOR = ","

# Upper-cased key prefix -> BulkRecord attribute
FIELD_KEYS: Dict[str, str] = {
    "NAME:": "name",
    "PARENTS:": "parents",
    "SPOUSES:": "spouses",
    "SIBLINGS:": "siblings",
    "CHILDREN:": "children",
}


@dataclass
class BulkRecord:
    """
    One candidate member parsed from a bulk text line.

    Attributes:
        lineno: 1-based line number in the pasted text.
        name: Member name (never empty for a yielded record).
        parents / spouses / siblings / children: Names in authored order.
    """
    lineno: int
    name: str
    parents: List[str] = field(default_factory=list)
    spouses: List[str] = field(default_factory=list)
    siblings: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)

    def to_member(self) -> FamilyMember:
        return FamilyMember(
            name=self.name,
            parents=list(self.parents),
            spouses=list(self.spouses),
            children=list(self.children),
            siblings=list(self.siblings),
        )


def split_names(value: str) -> List[str]:
    """Split a comma-separated list, trimming entries and dropping blanks."""
    return [part.strip() for part in value.split(LIST_SEPARATOR) if part.strip()]


def parse_bulk_line(line: str, lineno: int = 0) -> Optional[BulkRecord]:
    """
    Parse one ``NAME:<n>; PARENTS:<a,b>; ...`` line.

    Keys match case-insensitively by prefix and may come in any order.
    Unknown fields are ignored, missing lists stay empty. Returns None for
    lines without a non-empty NAME field.

    Examples:
        "NAME:John; PARENTS:Mary,Tom; SPOUSES:Jane"
        "spouses: Jane ; name: John"
    """
    values: Dict[str, str] = {}

    for component in line.split(FIELD_SEPARATOR):
        trimmed = component.strip()
        upper = trimmed.upper()
        for prefix, attr in FIELD_KEYS.items():
            if upper.startswith(prefix):
                values[attr] = trimmed[len(prefix):].strip()
                break

    name = values.get("name", "")
    if not name:
        return None

    return BulkRecord(
        lineno=lineno,
        name=name,
        parents=split_names(values.get("parents", "")),
        spouses=split_names(values.get("spouses", "")),
        siblings=split_names(values.get("siblings", "")),
        children=split_names(values.get("children", "")),
    )


def parse_bulk_text(text: str) -> Iterator[BulkRecord]:
    """
    Yield a BulkRecord for every usable line of ``text``.

    Blank lines are skipped silently; lines without a NAME field are
    skipped with a debug log entry.
    """
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        record = parse_bulk_line(line, lineno=lineno)
        if record is None:
            log.debug("Line %d: no NAME field, skipped -> %r", lineno, line)
            continue

        yield record


def _union_into(target: List[str], extra: List[str]) -> bool:
    changed = False
    for name in extra:
        if name not in target:
            target.append(name)
            changed = True
    return changed


def merge_bulk_records(members: Members, records: List[BulkRecord]) -> StoreChange:
    """
    Merge parsed records into ``members`` in place.

    An existing member with the same name gains the set union of each
    relation list; nothing is ever removed. New names become new members.
    """
    change = StoreChange()

    for record in records:
        existing = members.get(record.name)
        if existing is None:
            members[record.name] = record.to_member()
            change.added.append(record.name)
            continue

        changed = False
        for rel in RELATION_FIELDS:
            changed |= _union_into(getattr(existing, rel), getattr(record, rel))
        if changed and record.name not in change.added and record.name not in change.updated:
            change.updated.append(record.name)

    return change


def format_bulk_line(member: FamilyMember) -> str:
    return (
        f"NAME:{member.name}; "
        f"PARENTS:{', '.join(member.parents)}; "
        f"SPOUSES:{', '.join(member.spouses)}; "
        f"SIBLINGS:{', '.join(member.siblings)}; "
        f"CHILDREN:{', '.join(member.children)}"
    )
