"""
CLI package for family_tree.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from family_tree.cli.app import app, main

__all__ = [
    "app",
    "main",
]
