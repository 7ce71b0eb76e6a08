
from __future__ import annotations

import typer

from genealogy_tree.cli.commands.export import export_command
from genealogy_tree.cli.commands.ids import new_id_command, rename_command
from genealogy_tree.cli.commands.show import show_command
from genealogy_tree.cli.commands.validate import validate_command

app = typer.Typer(
    name="genealogy-tree",
    help="Genealogy tree viewer, validator and editor",
    add_completion=False,
)

app.command("show")(show_command)
app.command("export")(export_command)
app.command("validate")(validate_command)
app.command("new-id")(new_id_command)
app.command("rename")(rename_command)


def main():
    app()


if __name__ == "__main__":
    main()
