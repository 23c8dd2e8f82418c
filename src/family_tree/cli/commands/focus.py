from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from family_tree.cli.utils import levels_table, load_engine
from family_tree.core.exceptions import MemberNotFoundError

console = Console()


def focus_command(
    tree: Path = typer.Argument(..., exists=True, readable=True),
    name: str = typer.Argument(..., help="Member to center the view on"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show the neighborhood of one member: two generations up, all descendants.
    """
    engine = load_engine(tree, verbose=verbose)

    try:
        engine.focus(name)
    except MemberNotFoundError:
        console.print(f"[red]No member named {name!r}.[/red]")
        raise typer.Exit(code=1)

    groups = engine.current_levels()
    console.print(levels_table(groups, title=f"Family of {name}", focus_name=name))
