"""CLI command for replaying a previous editkit invocation."""

from __future__ import annotations

import shlex
from typing import List, Optional

import typer
from rich.markup import escape

from editkit.candidates import (
    CandidateSet,
    any_of,
    build_candidates,
    exclude_non_command,
    render_command,
    select_candidate,
)
from editkit.cli.common import get_settings, make_console, reported_errors, selector_for
from editkit.exceptions import EmptyCandidateSet
from editkit.history import CommandHistory, should_record
from editkit.utils.logging import get_logger

console = make_console()
log = get_logger(__name__, component="cli.repeat")


def _not_replayable(label: str) -> bool:
    return not should_record(shlex.split(label))


def command_candidates(history: CommandHistory) -> CandidateSet[List[str]]:
    return build_candidates(history.entries(), render_command, any_of(exclude_non_command, _not_replayable))


def repeat(
    ctx: typer.Context,
    choice: Optional[str] = typer.Option(
        None, "--choice", help="Pick a history entry by number or exact text instead of prompting"
    ),
) -> None:
    """Re-run a previous command chosen from command history."""

    settings = get_settings(ctx)
    history = CommandHistory(settings.command_history_file, limit=settings.history_limit)

    with reported_errors(console):
        candidates = command_candidates(history)
        try:
            argv = select_candidate(candidates, selector_for(choice, console, "Repeat command"))
        except EmptyCandidateSet:
            console.print("[yellow]Command history is empty[/yellow]")
            return

    if argv is None:
        console.print("Nothing selected")
        return

    console.print(f"Repeating: {escape(render_command(argv))}")
    log.info("Replaying command", extra={"command": render_command(argv)})
    root = ctx.find_root().command
    exit_code = root.main(args=list(argv), prog_name=ctx.find_root().info_name, standalone_mode=False)
    if exit_code:
        raise typer.Exit(code=exit_code)
    history.record(argv)


__all__ = ["command_candidates", "repeat"]
