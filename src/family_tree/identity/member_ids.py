# src/family_tree/identity/member_ids.py
from __future__ import annotations

import uuid
from typing import Any, Optional


def new_member_id() -> str:
    """
    Fresh opaque member identifier. Random, so ids are never reused.
    """
    return str(uuid.uuid4()).upper()


def normalize_member_id(value: Any) -> Optional[str]:
    """
    Identifier read from a snapshot, surrounding whitespace removed.

    Ids are opaque: any non-blank string is kept as written so records
    still match by id on load and append. Blank or missing values give None.
    """
    if value is None:
        return None

    text = str(value).strip()
    return text or None


__all__ = [
    "new_member_id",
    "normalize_member_id",
]
