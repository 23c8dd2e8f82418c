"""
CLI command modules for family_tree.

Each command module defines a single Typer-compatible command function.
"""

from family_tree.cli.commands.export import export_command
from family_tree.cli.commands.focus import focus_command
from family_tree.cli.commands.import_bulk import import_command
from family_tree.cli.commands.levels import levels_command
from family_tree.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "focus_command",
    "import_command",
    "levels_command",
    "stats_command",
]
