from .json_snapshot import (
    append_snapshot,
    member_from_dict,
    member_to_dict,
    members_from_snapshot,
    parse_snapshot,
    read_snapshot,
    serialize_snapshot,
    write_snapshot,
)
from .text_exporter import generate_export_text

__all__ = [
    "append_snapshot",
    "generate_export_text",
    "member_from_dict",
    "member_to_dict",
    "members_from_snapshot",
    "parse_snapshot",
    "read_snapshot",
    "serialize_snapshot",
    "write_snapshot",
]
