from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from family_tree.store.member_store import MemberStore


@dataclass
class EngineContext:
    """
    Shared engine state.
    One context per open family tree; only one writer touches it.
    """

    config: Any
    logger: Any

    store: MemberStore = field(default_factory=MemberStore)

    focused_member_id: Optional[str] = None
    dirty: bool = False

    stats: Dict[str, Any] = field(default_factory=dict)
