from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from family_tree.cli.utils import write_text
from family_tree.engine import FamilyTreeEngine

console = Console()


def import_command(
    bulk: Path = typer.Argument(..., exists=True, readable=True, help="Bulk text file"),
    into: Optional[Path] = typer.Option(
        None,
        "--into",
        help="Existing JSON snapshot to merge into",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write the snapshot to file instead of stdout",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Merge bulk text into a snapshot and write the resulting JSON.
    """
    engine = FamilyTreeEngine()

    if into is not None:
        engine.load_snapshot(into.read_text(encoding="utf-8"))

    change = engine.import_bulk_text(bulk.read_text(encoding="utf-8"))
    write_text(engine.export_json(pretty=True), out=out)
    engine.mark_saved()

    if verbose:
        console.log(f"Imported: {len(change.added)} added, {len(change.updated)} updated")
