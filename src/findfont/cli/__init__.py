"""Command-line interface for findfont.

This module provides the CLI using Typer with rich output.

Commands:
- find: Print the best matching font path
- list: List all font files
- dirs: Show the search directories
"""

from findfont.cli.app import cli, main

__all__ = ["cli", "main"]
