"""
CLI package for genealogy_tree.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from genealogy_tree.cli.app import app, main

__all__ = [
    "app",
    "main",
]
