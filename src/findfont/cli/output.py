"""Rich console output helpers for the CLI."""

import os
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()
error_console = Console(stderr=True)

SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def displayable(text: str) -> str:
    """Replace undecodable file name bytes so the text can be printed.

    File names that are not valid in the filesystem encoding reach Python with
    surrogate escapes, which cannot be written to the console.
    """
    return os.fsencode(text).decode(sys.getfilesystemencoding(), errors="replace")


def print_path(path: str) -> None:
    """Print a path without markup interpretation."""
    console.print(Text(displayable(path)), soft_wrap=True)


def print_count(count: int, suffixes: list[str]) -> None:
    """Print the number of fonts found.

    Args:
        count: Number of font files
        suffixes: Suffixes that were searched for
    """
    plural = "font" if count == 1 else "fonts"
    console.print(f"{count} {plural} {SYM_DOT} {', '.join(suffixes)}")


def print_directories(directories: list[str], existing: set[str]) -> None:
    """Print the search directories in order, marking which exist.

    Args:
        directories: Directories in search order
        existing: Subset of ``directories`` present on disk
    """
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", justify="right")
    table.add_column("Directory")
    table.add_column("Exists", justify="center")

    for idx, directory in enumerate(directories, start=1):
        mark = f"[green]{SYM_OK}[/green]" if directory in existing else f"[dim]{SYM_ERR}[/dim]"
        table.add_row(str(idx), Text(displayable(directory)), mark)

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    error_console.print(f"[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    error_console.print(Text(displayable(message)))
    if details:
        error_console.print(Text(f"  {displayable(details)}"))
