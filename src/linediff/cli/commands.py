"""CLI command implementations"""

from typing import Annotated, Optional

import typer

from linediff.config import Settings, load_config
from linediff.core.diff import diff, prune_context
from linediff.core.models import Hunk, Operation
from linediff.core.render import format_hunks
from linediff.core.summary import summarize
from linediff.util.fs import read_lines


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _diff_files(old: str, new: str, settings: Settings) -> list[Hunk]:
    """Read both files and diff them, failing cleanly on unreadable input."""
    try:
        a, b = read_lines(old), read_lines(new)
    except (OSError, UnicodeDecodeError) as e:
        _fail("Could not read input", e)
    return diff(a, b, warn_cells=settings.warn_cells)


def diff_cmd(
    old: Annotated[str, typer.Argument(help="Original file")],
    new: Annotated[str, typer.Argument(help="Modified file")],
    context: Annotated[Optional[int], typer.Option("--context", "-c", help="Unchanged lines kept around each change")] = None,
    full: Annotated[bool, typer.Option("--full", help="Show every line; disables pruning")] = False,
    line_numbers: Annotated[bool, typer.Option("--line-numbers", "-n", help="Prefix lines with 1-based line numbers")] = False,
    ):
    """Print the line diff of OLD and NEW, pruned to a context window."""
    settings = _settings(overrides={"context": context})
    hunks = _diff_files(old, new, settings)
    if not full:
        if all(h.operation == Operation.unchanged for h in hunks):
            return
        hunks = prune_context(hunks, settings.context)
    if hunks:
        typer.echo(format_hunks(hunks, line_numbers=line_numbers, gap_marker=settings.gap_marker))


def stats_cmd(
    old: Annotated[str, typer.Argument(help="Original file")],
    new: Annotated[str, typer.Argument(help="Modified file")],
    ):
    """Print unchanged/deleted/inserted line counts for OLD and NEW."""
    settings = _settings()
    counts = summarize(_diff_files(old, new, settings))
    typer.echo(
        f"{counts['unchanged']} unchanged, "
        f"{counts['deleted']} deleted, "
        f"{counts['inserted']} inserted"
    )
