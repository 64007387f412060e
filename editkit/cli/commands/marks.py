"""CLI commands for the mark ring."""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from editkit.candidates import CandidateSet, build_candidates, exclude_blank, render_position, select_candidate
from editkit.cli.common import (
    EXIT_CONFIG,
    fail,
    get_settings,
    make_console,
    report_result,
    reported_errors,
    selector_for,
)
from editkit.exceptions import EmptyCandidateSet
from editkit.history import MarkRing, Position
from editkit.shell.process import invoke
from editkit.utils.logging import get_logger

console = make_console()
log = get_logger(__name__, component="cli.mark")

mark_app = typer.Typer(help="Record and revisit file positions", no_args_is_help=True)


def _ring(ctx: typer.Context) -> MarkRing:
    settings = get_settings(ctx)
    return MarkRing(settings.mark_ring_file, limit=settings.mark_ring_max)


def position_candidates(ring: MarkRing, path: Path) -> CandidateSet[Position]:
    return build_candidates(
        ring.entries(path),
        lambda position: render_position(position.line, ring.line_text(position)),
        exclude_blank,
    )


@mark_app.command("push")
def push(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File containing the position"),
    line: int = typer.Argument(..., min=1, help="1-based line number"),
) -> None:
    """Push a position onto the mark ring."""
    with reported_errors(console):
        position = _ring(ctx).push(file, line)
    console.print(f"Mark set at {escape(str(position))}")


@mark_app.command("goto")
def goto(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File whose marks to choose from"),
    choice: Optional[str] = typer.Option(
        None, "--choice", help="Pick a mark by number or exact text instead of prompting"
    ),
    open_editor: bool = typer.Option(
        False, "--open", help="Open the position with the configured editor (e.g. 'emacsclient -n')"
    ),
) -> None:
    """Choose one of the marks recorded in FILE and print its position."""

    settings = get_settings(ctx)
    ring = _ring(ctx)
    with reported_errors(console):
        try:
            position = select_candidate(position_candidates(ring, file), selector_for(choice, console, "Go to mark"))
        except EmptyCandidateSet:
            console.print(f"[yellow]No marks in {escape(str(file))}[/yellow]")
            return

    if position is None:
        console.print("Nothing selected")
        return

    console.print(escape(str(position)))
    if not open_editor:
        return
    if not settings.editor:
        fail(console, "Error: no editor configured (set EDITOR or 'editor' in config)", EXIT_CONFIG)
    parts = shlex.split(settings.editor)
    with reported_errors(console):
        result = invoke(parts[0], [*parts[1:], f"+{position.line}", position.path], timeout=settings.process_timeout)
    report_result(console, result, f"Opened {position}", parts[0])


@mark_app.command("list")
def list_marks(ctx: typer.Context) -> None:
    """Show the mark ring, most recent first."""
    ring = _ring(ctx)
    with reported_errors(console):
        positions = ring.entries()
    if not positions:
        console.print("[yellow]Mark ring is empty[/yellow]")
        return
    table = Table(title="Mark ring")
    table.add_column("#", justify="right")
    table.add_column("Position")
    table.add_column("Text")
    for idx, position in enumerate(positions, start=1):
        table.add_row(str(idx), escape(str(position)), escape(ring.line_text(position)))
    console.print(table)


@mark_app.command("clear")
def clear(ctx: typer.Context) -> None:
    """Forget every mark."""
    _ring(ctx).clear()
    console.print("Mark ring cleared")


__all__ = ["mark_app", "position_candidates"]
