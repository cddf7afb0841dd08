"""Command-line interface for searchbot."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Settings, configure_logging
from .display import print_results
from .search import SearchError, search_files

app = typer.Typer(
    name="searchbot",
    help="Find files by name under a directory tree.",
    rich_markup_mode="rich",
    add_completion=False,
)
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        print(f"[cyan]searchbot[/cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.command(help="Search for files whose names contain PATTERN.")
def main(
    pattern: str = typer.Argument(..., help="Text to look for in file names"),
    directory: Optional[Path] = typer.Argument(
        None,
        help="Directory to search (defaults to current directory)",
    ),
    no_recursive: bool = typer.Option(
        False,
        "--no-recursive",
        "-nr",
        "-n",
        help="Only search the top directory (by default search is recursive)",
    ),
    exact: bool = typer.Option(
        False,
        "--exact",
        "-e",
        help="Match the exact file name (by default matches substrings)",
    ),
    ignore_case: bool = typer.Option(
        False,
        "--ignore-case",
        "-i",
        help="Case insensitive search (by default search is case sensitive)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log traversal diagnostics to stderr",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Search a directory tree and print matching files as a table."""
    try:
        settings = Settings()
        configure_logging(logging.DEBUG if verbose else None, settings=settings)
    except (ValidationError, ValueError) as e:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if directory is None:
        directory = Path.cwd()
    root = directory.resolve()

    if not root.exists():
        err_console.print(f"[red]Directory does not exist:[/red] {escape(str(root))}")
        raise typer.Exit(1)

    options = settings.search_options(
        no_recursive=no_recursive,
        exact=exact,
        ignore_case=ignore_case,
    )

    print(f"Searching for '{escape(pattern)}' in {escape(str(root))}...")

    try:
        results = search_files(pattern, root, options)
    except SearchError as e:
        logger.debug(f"Search failed: {e}", exc_info=True)
        err_console.print(f"[red]Error searching files:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    print_results(results)


if __name__ == "__main__":
    app()
