from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from family_tree.cli.utils import load_engine
from family_tree.levels.full_tree import unreachable_names
from family_tree.models import RELATION_FIELDS

console = Console()


def stats_command(
    tree: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a family tree file.
    """
    engine = load_engine(tree, verbose=verbose)
    members = engine.store.snapshot()

    table = Table(title="Family Tree Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Members", str(len(members)))
    for rel in RELATION_FIELDS:
        edges = sum(len(getattr(m, rel)) for m in members.values())
        table.add_row(rel.capitalize(), str(edges))
    table.add_row("Generations", str(len(engine.get_all_levels())))
    table.add_row("Unassigned levels", str(engine.ctx.stats.get("unassigned", 0)))
    table.add_row("Unreachable from roots", str(len(unreachable_names(members))))
    table.add_row("Dangling references", str(engine.ctx.stats.get("dangling_references", 0)))

    console.print(table)
