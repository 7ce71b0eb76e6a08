from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from genealogy_tree.cli.utils import build_context, open_store
from genealogy_tree.core.exceptions import TreeLoadError
from genealogy_tree.core.pipeline import TreePipeline

console = Console()


def validate_command(
    tree: Optional[str] = typer.Option(None, "--tree", "-t", help="Tree id (default from config)"),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Store directory"),
):
    """
    Check every stored record and the derived graph. Exits 1 on findings.
    """
    ctx = build_context(tree=tree)

    try:
        result = TreePipeline(open_store(data_dir), ctx).run()
    except TreeLoadError as exc:
        console.print(f"[red]Validation could not run:[/red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title=f"Validation: {ctx.tree_id}")
    table.add_column("Check", style="bold")
    table.add_column("Person")
    table.add_column("Field")
    table.add_column("Problem")

    for person_id, violations in result.record_violations.items():
        for v in violations:
            table.add_row("record", person_id or "-", v.field, v.message)
    for d in result.graph_diagnostics:
        table.add_row("graph", d.person_id or "-", d.field, d.message)

    if table.row_count == 0:
        console.print(f"[green]No problems found in {len(result.nodes)} people[/green]")
        return

    console.print(table)
    raise typer.Exit(code=1)
