from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from family_tree.cli.utils import load_engine, write_text

console = Console()


class ExportFormat(str, Enum):
    text = "text"
    json = "json"


def export_command(
    tree: Path = typer.Argument(..., exists=True, readable=True),
    fmt: ExportFormat = typer.Option(
        ExportFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export a family tree as bulk text or a JSON snapshot (stdout by default).
    """
    engine = load_engine(tree, verbose=verbose)

    if fmt is ExportFormat.text:
        payload = engine.export_text()
    else:
        payload = engine.export_json(pretty=pretty)

    write_text(payload, out=out)

    if verbose:
        console.log("Export complete")
