"""
CLI command modules for genealogy_tree.

Each command module defines Typer-compatible command functions.
"""

from genealogy_tree.cli.commands.export import export_command
from genealogy_tree.cli.commands.ids import new_id_command, rename_command
from genealogy_tree.cli.commands.show import show_command
from genealogy_tree.cli.commands.validate import validate_command

__all__ = [
    "export_command",
    "new_id_command",
    "rename_command",
    "show_command",
    "validate_command",
]
