
from __future__ import annotations

import typer

from family_tree.cli.commands.export import export_command
from family_tree.cli.commands.focus import focus_command
from family_tree.cli.commands.import_bulk import import_command
from family_tree.cli.commands.levels import levels_command
from family_tree.cli.commands.stats import stats_command

app = typer.Typer(
    name="family-tree",
    help="Inspect and export family trees",
    add_completion=False,
)

app.command("levels")(levels_command)
app.command("focus")(focus_command)
app.command("stats")(stats_command)
app.command("export")(export_command)
app.command("import")(import_command)


def main():
    app()


if __name__ == "__main__":
    main()
