from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from genealogy_tree.cli.utils import build_context, open_store
from genealogy_tree.core.exceptions import GenealogyError, ValidationFailedError
from genealogy_tree.editing import rename_person
from genealogy_tree.identity.id_generator import generate_id

console = Console()


def new_id_command(
    last: str = typer.Option(..., "--last", help="Last (family) name"),
    first: str = typer.Option(..., "--first", help="First (given) name"),
    middle: Optional[str] = typer.Option(None, "--middle", help="Middle name"),
    tree: Optional[str] = typer.Option(None, "--tree", "-t", help="Tree id (default from config)"),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Store directory"),
):
    """
    Print the id a new person with this name would get in the tree.
    """
    ctx = build_context(tree=tree)
    existing = set(open_store(data_dir).fetch_documents(ctx.tree_id))
    print(generate_id(last, first, middle, existing_ids=existing))


def rename_command(
    old_id: str = typer.Argument(..., help="Current person id"),
    new_id: Optional[str] = typer.Option(None, "--to", help="New id (default: regenerate from current name)"),
    user: str = typer.Option(..., "--user", "-u", help="Acting user id (must have the writer role)"),
    tree: Optional[str] = typer.Option(None, "--tree", "-t", help="Tree id (default from config)"),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Store directory"),
):
    """
    Change a person's id and update every record that references it.
    """
    ctx = build_context(tree=tree, user=user)

    try:
        renamed = rename_person(open_store(data_dir), old_id, ctx.user_id, new_id=new_id, tree_id=ctx.tree_id)
    except ValidationFailedError as exc:
        for v in exc.violations:
            console.print(f"[red]{v}[/red]")
        raise typer.Exit(code=1)
    except GenealogyError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    console.print(f"{old_id} -> [bold]{renamed.id}[/bold]")
