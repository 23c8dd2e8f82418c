"""
Family relationship graph engine.

Keeps a name-keyed store of family members consistent (symmetric,
deduplicated relations), assigns generation levels and builds the ordered
level groups used to render a full tree or a focused neighborhood.
"""

from family_tree.engine import FamilyTreeEngine
from family_tree.models import FamilyMember, LevelGroup, StoreChange
from family_tree.store import MemberStore

__version__ = "0.1.0"

__all__ = [
    "FamilyMember",
    "FamilyTreeEngine",
    "LevelGroup",
    "MemberStore",
    "StoreChange",
    "__version__",
]
