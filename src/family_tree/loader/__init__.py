# src/family_tree/loader/__init__.py

"""
Bulk text loading.

Typical usage:

    from family_tree.loader import parse_bulk_text, merge_bulk_records

    records = list(parse_bulk_text(text))
    change = merge_bulk_records(members, records)
"""

from .bulk_text import (
    BulkRecord,
    format_bulk_line,
    merge_bulk_records,
    parse_bulk_line,
    parse_bulk_text,
    split_names,
)

__all__ = [
    "BulkRecord",
    "format_bulk_line",
    "merge_bulk_records",
    "parse_bulk_line",
    "parse_bulk_text",
    "split_names",
]
