"""Shared helpers for CLI commands: settings access, selectors, error mapping."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape

from editkit.config.settings import Settings
from editkit.exceptions import (
    ConfigValidationError,
    DirectoryNotFoundError,
    ExternalToolError,
    SchemaError,
)
from editkit.interfaces.selector import PromptSelector, Selector, StaticSelector
from editkit.shell.process import ProcessResult

EXIT_CONFIG = 1
EXIT_TOOL = 2
EXIT_MISSING_PATH = 3
EXIT_PROCESS_FAILED = 4


@dataclass
class AppContext:
    settings: Settings


def get_settings(ctx: typer.Context) -> Settings:
    obj = ctx.find_root().obj
    if not isinstance(obj, AppContext):
        raise RuntimeError("editkit settings were not initialised")
    return obj.settings


def make_console() -> Console:
    # status lines carry long paths; never wrap them
    return Console(soft_wrap=True)


def selector_for(choice: Optional[str], console: Console, prompt: str) -> Selector:
    if choice is not None:
        return StaticSelector(choice)
    return PromptSelector(console, prompt=prompt)


def fail(console: Console, message: str, code: int) -> None:
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=code)


@contextmanager
def reported_errors(console: Console) -> Iterator[None]:
    """Turn expected failures into one red line and a non-zero exit code."""
    try:
        yield
    except (ConfigValidationError, SchemaError) as exc:
        fail(console, f"Error: {exc}", EXIT_CONFIG)
    except ExternalToolError as exc:
        fail(console, f"Error: {exc}", EXIT_TOOL)
    except (DirectoryNotFoundError, FileNotFoundError) as exc:
        fail(console, f"Error: {exc}", EXIT_MISSING_PATH)


def report_result(console: Console, result: ProcessResult, success: str, action: str) -> None:
    """Print the status line for a finished process; exit non-zero on failure."""
    if result.ok:
        console.print(f"[green]{escape(success)}[/green]")
        return
    detail = f": {result.message}" if result.message else ""
    fail(console, f"{action} failed with exit status {result.returncode}{detail}", EXIT_PROCESS_FAILED)


__all__ = [
    "AppContext",
    "EXIT_CONFIG",
    "EXIT_MISSING_PATH",
    "EXIT_PROCESS_FAILED",
    "EXIT_TOOL",
    "fail",
    "get_settings",
    "make_console",
    "report_result",
    "reported_errors",
    "selector_for",
]
