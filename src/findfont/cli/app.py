"""CLI application entry point for findfont.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from findfont import __version__
from findfont.cli.output import console, print_count, print_directories, print_error, print_path
from findfont.config import FindFontSettings, LoggingConfig, SearchConfig
from findfont.core import find_with_suffixes, list_with_suffixes
from findfont.exceptions import FindFontError, FontNotFoundError
from findfont.utils import configure_logging

app = typer.Typer(
    name="findfont",
    help="Locate font files in the current directory and the platform font directories.",
    add_completion=False,
    no_args_is_help=True,
)

SuffixOption = Annotated[
    list[str] | None,
    typer.Option(
        "--suffix",
        "-s",
        help="Font file suffix to accept (repeatable, default: .ttf .ttc .otf)",
    ),
]
DirectoryOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--dir",
        "-d",
        help="Extra directory to search after the font directories (repeatable)",
    ),
]
NoCwdOption = Annotated[
    bool,
    typer.Option(
        "--no-cwd",
        help="Do not search the current directory",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]findfont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Locate installed font files by name."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(f"Invalid log level: {log_level}", details="Valid values: DEBUG, INFO, WARNING, ERROR")
        raise typer.Exit(code=1)

    logging_config = LoggingConfig(log_file=log_file, log_level=log_level.upper())
    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
    )
    ctx.obj = logging_config


def _build_settings(
    ctx: typer.Context,
    suffixes: list[str] | None,
    directories: list[Path] | None,
    no_cwd: bool,
    platform_name: str | None = None,
) -> FindFontSettings:
    search_options: dict[str, object] = {
        "extra_directories": directories or [],
        "include_current_directory": not no_cwd,
        "platform": platform_name,
    }
    if suffixes:
        search_options["suffixes"] = suffixes
    search = SearchConfig(**search_options)
    logging_config = ctx.obj if isinstance(ctx.obj, LoggingConfig) else LoggingConfig()
    return FindFontSettings(search=search, logging=logging_config)


@app.command()
def find(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(
            help="Font file name, bare font name, or path",
            show_default=False,
        ),
    ],
    suffix: SuffixOption = None,
    directory: DirectoryOption = None,
    no_cwd: NoCwdOption = False,
) -> None:
    """Print the path of the font that best matches NAME.

    An exact file name match (ignoring case) wins. Otherwise the shortest
    font file name containing NAME is used.

    Example:
        findfont find DejaVuSans
    """
    settings = _build_settings(ctx, suffix, directory, no_cwd)

    try:
        path = find_with_suffixes(
            name,
            settings.search.suffixes,
            directories=settings.search_directories(),
        )
    except FontNotFoundError as e:
        print_error(str(e), details=f"Searched {len(settings.search_directories())} directories")
        raise typer.Exit(code=1)
    except FindFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_path(path)


@app.command("list")
def list_command(
    ctx: typer.Context,
    suffix: SuffixOption = None,
    directory: DirectoryOption = None,
    no_cwd: NoCwdOption = False,
    count: Annotated[
        bool,
        typer.Option(
            "--count",
            "-c",
            help="Print only the number of fonts found",
        ),
    ] = False,
) -> None:
    """List every font file in the search directories."""
    settings = _build_settings(ctx, suffix, directory, no_cwd)
    paths = list_with_suffixes(
        settings.search.suffixes,
        directories=settings.search_directories(),
    )

    if count:
        print_count(len(paths), settings.search.suffixes)
        return

    for path in paths:
        print_path(path)


@app.command()
def dirs(
    ctx: typer.Context,
    platform_name: Annotated[
        str | None,
        typer.Option(
            "--platform",
            "-p",
            help="Show the directories of another platform (Linux|Darwin|Windows)",
        ),
    ] = None,
    directory: DirectoryOption = None,
    no_cwd: NoCwdOption = False,
) -> None:
    """Show the directories searched for fonts, in search order."""
    settings = _build_settings(ctx, None, directory, no_cwd, platform_name)
    directories = settings.search_directories()
    existing = {d for d in directories if os.path.isdir(d)}
    print_directories(directories, existing)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
