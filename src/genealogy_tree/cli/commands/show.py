from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from genealogy_tree.cli.utils import build_context, open_store
from genealogy_tree.core.exceptions import TreeLoadError
from genealogy_tree.core.pipeline import TreePipeline
from genealogy_tree.i18n import translate
from genealogy_tree.rendering.renderers import ConsoleTreeRenderer, render_empty_state

console = Console()


def show_command(
    tree: Optional[str] = typer.Option(None, "--tree", "-t", help="Tree id (default from config)"),
    language: Optional[str] = typer.Option(None, "--lang", "-l", help="Display language: en, fr, vi"),
    root: Optional[str] = typer.Option(None, "--root", help="Only show descendants of this person id"),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Store directory"),
):
    """
    Print the family tree as a descendant tree.
    """
    ctx = build_context(tree=tree, language=language)
    pipeline = TreePipeline(open_store(data_dir), ctx, ConsoleTreeRenderer(root_id=root))

    try:
        result = pipeline.run()
    except TreeLoadError as exc:
        console.print(f"[red]{translate('errorLoadingData', ctx.language)}[/red]")
        console.print(f"[dim]{exc}[/dim]")
        raise typer.Exit(code=1)

    if result.empty:
        console.print(render_empty_state(ctx))
        return

    console.print(result.output)
    if ctx.warnings:
        console.print(f"[yellow]{len(ctx.warnings)} validation warning(s); run 'validate' for details[/yellow]")
