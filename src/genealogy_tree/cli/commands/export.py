from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from genealogy_tree.cli.utils import build_context, open_store, write_json
from genealogy_tree.config import get_config
from genealogy_tree.core.exceptions import TreeLoadError
from genealogy_tree.core.pipeline import TreePipeline
from genealogy_tree.rendering.renderers import FamilyChartPayloadRenderer

console = Console(stderr=True)


def export_command(
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
    tree: Optional[str] = typer.Option(None, "--tree", "-t", help="Tree id (default from config)"),
    language: Optional[str] = typer.Option(None, "--lang", "-l", help="Language for card labels"),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Store directory"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export the chart payload (nodes, card labels, settings) as JSON.
    """
    ctx = build_context(tree=tree, language=language)
    renderer = FamilyChartPayloadRenderer(get_config().chart)

    try:
        result = TreePipeline(open_store(data_dir), ctx, renderer).run()
    except TreeLoadError as exc:
        console.print(f"[red]Export failed:[/red] {exc}")
        raise typer.Exit(code=1)

    payload = result.output if not result.empty else renderer.render([], ctx)

    if verbose:
        console.log(f"Exporting {len(result.nodes)} people")

    write_json(payload, out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
