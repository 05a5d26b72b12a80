"""CLI entry point for pathologize - cross-platform safe filenames."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import get_settings
from .constants import MAX_LENGTH
from .sanitizer import clean, clean_path, is_clean, truncate_filename
from .version import APP_VERSION

app = typer.Typer(
    name="pathologize",
    help="Turn arbitrary text into filenames that are safe on every major filesystem",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(2)
    level = "DEBUG" if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_names(names: Optional[list[str]]) -> list[str]:
    """Return the given names, or one name per line from stdin if none were given."""
    if names:
        return names
    if sys.stdin.isatty():
        err_console.print("[red]No names given and nothing piped on stdin[/red]")
        raise typer.Exit(2)
    return sys.stdin.read().splitlines()


def _emit(value: str) -> None:
    # Plain echo: rich would strip control codes from the value
    typer.echo(value)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every reserved-name defusal and blank fallback",
    ),
):
    """Sanitize names for Windows, macOS, Linux and FAT filesystems at once."""
    _configure_logging(verbose)


@app.command("clean")
def clean_command(
    names: Optional[list[str]] = typer.Argument(
        None, help="Names to sanitize (read from stdin when omitted)"
    ),
):
    """Print a safe filename for each NAME."""
    for name in _read_names(names):
        _emit(clean(name))


@app.command("path")
def path_command(
    paths: Optional[list[str]] = typer.Argument(
        None, help="Paths to sanitize (read from stdin when omitted)"
    ),
    sep: Optional[str] = typer.Option(
        None,
        "--sep",
        help="Path separator (default: PATHOLOGIZE_PATH_SEPARATOR or the host separator)",
    ),
):
    """Sanitize every segment of each PATH independently."""
    separator = sep or get_settings().path_separator
    logger.debug("Splitting paths on %r", separator)
    for path in _read_names(paths):
        _emit(clean_path(path, separator))


@app.command("check")
def check_command(
    names: Optional[list[str]] = typer.Argument(
        None, help="Names to check (read from stdin when omitted)"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only set the exit code, print nothing"
    ),
):
    """Check whether each NAME is already safe. Exits 1 if any is not."""
    names = _read_names(names)
    if not names:
        return
    unclean = [name for name in names if not is_clean(name)]

    if not quiet:
        table = Table(title=f"Checked {len(names)} name(s)")
        table.add_column("Name", style="cyan")
        table.add_column("Clean")
        table.add_column("Suggestion", style="green")
        for name in names:
            ok = name not in unclean
            table.add_row(
                repr(name),
                "[green]yes[/green]" if ok else "[red]no[/red]",
                "" if ok else repr(clean(name)),
            )
        console.print(table)

    if unclean:
        raise typer.Exit(1)


@app.command("truncate")
def truncate_command(
    names: Optional[list[str]] = typer.Argument(
        None, help="Names to truncate (read from stdin when omitted)"
    ),
    max_length: int = typer.Option(
        MAX_LENGTH, "--max-length", "-n", min=1, help="Maximum length in units"
    ),
    as_bytes: bool = typer.Option(
        False,
        "--bytes",
        help="Count UTF-8 bytes instead of characters; a split character is dropped",
    ),
):
    """Truncate each NAME to the maximum filename length."""
    for name in _read_names(names):
        if as_bytes:
            truncated = truncate_filename(name.encode("utf-8"), max_length)
            _emit(truncated.decode("utf-8", errors="ignore"))
        else:
            _emit(truncate_filename(name, max_length))


@app.command()
def version():
    """Show the installed version."""
    _emit(APP_VERSION)


if __name__ == "__main__":
    app()
