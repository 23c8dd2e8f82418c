from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from family_tree.cli.utils import levels_table, load_engine

console = Console()


def levels_command(
    tree: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show the full family tree, one row per generation.
    """
    engine = load_engine(tree, verbose=verbose)
    groups = engine.get_all_levels()

    if not groups:
        console.print("[yellow]No members reachable from a root.[/yellow]")
        raise typer.Exit(code=0)

    console.print(levels_table(groups, title="Family Tree"))
