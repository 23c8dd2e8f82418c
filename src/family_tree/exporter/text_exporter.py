from __future__ import annotations

from family_tree.loader.bulk_text import format_bulk_line
from family_tree.models import Members


def generate_export_text(members: Members) -> str:
    """
    Bulk text for every member, one line each, ordered by name ignoring
    case. Re-importing the output reproduces the same relations.
    """
    ordered = sorted(members.values(), key=lambda m: (m.name.casefold(), m.name))
    return "".join(format_bulk_line(m) + "\n" for m in ordered)
