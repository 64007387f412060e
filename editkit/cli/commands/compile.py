"""CLI command for running build commands and recalling them from compile history."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from editkit.candidates import build_candidates, exclude_blank, select_candidate
from editkit.cli.common import (
    EXIT_CONFIG,
    EXIT_MISSING_PATH,
    EXIT_PROCESS_FAILED,
    fail,
    get_settings,
    make_console,
    reported_errors,
    selector_for,
)
from editkit.exceptions import EmptyCandidateSet
from editkit.history import CompileHistory
from editkit.shell.process import run_shell
from editkit.utils.logging import get_logger

console = make_console()
log = get_logger(__name__, component="cli.compile")


def compile_command(
    ctx: typer.Context,
    command: Optional[str] = typer.Argument(
        None, help="Command line to run; omit to choose one from compile history"
    ),
    choice: Optional[str] = typer.Option(
        None, "--choice", help="Pick a history entry by number or exact text instead of prompting"
    ),
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Directory to run the command in"),
) -> None:
    """Run a compile command, recording it in compile history.

    Example:
        editkit compile "make -k test"
        editkit compile --choice 1
    """

    settings = get_settings(ctx)
    history = CompileHistory(settings.compile_history_file, limit=settings.history_limit)

    if cwd is not None and not cwd.expanduser().is_dir():
        fail(console, f"Error: Directory not found: {cwd}", EXIT_MISSING_PATH)

    with reported_errors(console):
        if command is None:
            candidates = build_candidates(history.entries(), str, exclude_blank)
            try:
                command = select_candidate(candidates, selector_for(choice, console, "Compile command"))
            except EmptyCandidateSet:
                console.print("[yellow]Compile history is empty[/yellow]")
                return
            if command is None:
                console.print("Nothing selected")
                return
        elif exclude_blank(command):
            fail(console, "Error: compile command must not be empty", EXIT_CONFIG)

        history.record(command)
        console.print(f"Compiling: {escape(command)}")
        result = run_shell(
            command,
            shell=settings.shell,
            cwd=cwd.expanduser() if cwd is not None else None,
        )

    output = "\n".join(part.rstrip("\n") for part in (result.stdout, result.stderr) if part.strip())
    if output:
        console.print(output, markup=False, highlight=False)

    if result.ok:
        console.print("[green]Compilation finished[/green]")
    else:
        log.warning("Compilation failed", extra={"command": command, "returncode": result.returncode})
        fail(console, f"Compilation exited abnormally with code {result.returncode}", EXIT_PROCESS_FAILED)


__all__ = ["compile_command"]
