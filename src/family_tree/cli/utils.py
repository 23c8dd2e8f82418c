from __future__ import annotations

import time
from pathlib import Path
from typing import List

from rich.console import Console
from rich.table import Table

from family_tree.engine import FamilyTreeEngine
from family_tree.models import LevelGroup

console = Console()

SNAPSHOT_SUFFIXES = {".json"}


def is_snapshot(path: Path) -> bool:
    return path.suffix.lower() in SNAPSHOT_SUFFIXES


def load_engine(path: Path, *, verbose: bool = False) -> FamilyTreeEngine:
    """
    Build an engine from a JSON snapshot or a bulk text file.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    engine = FamilyTreeEngine()
    text = path.read_text(encoding="utf-8")
    if is_snapshot(path):
        engine.load_snapshot(text)
    else:
        engine.import_bulk_text(text)
        engine.mark_saved()

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {len(engine.store)} members from {path.name} in {elapsed:.2f}s")

    return engine


def levels_table(groups: List[LevelGroup], *, title: str, focus_name: str | None = None) -> Table:
    table = Table(title=title)
    table.add_column("Level", justify="right", style="bold")
    table.add_column("Members")

    for group in groups:
        names = [
            f"[reverse]{name}[/reverse]" if name == focus_name else name
            for name in group.names
        ]
        table.add_row(str(group.level), ", ".join(names))

    return table


def write_text(payload: str, *, out: Path | None) -> None:
    """
    Write text to stdout or file.
    """
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload, end="" if payload.endswith("\n") else "\n")
