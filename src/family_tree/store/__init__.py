from family_tree.store.member_store import MemberStore

__all__ = [
    "MemberStore",
]
