"""CLI commands for load-path management."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from editkit.cli.common import get_settings, make_console, reported_errors
from editkit.loadpath import LoadPath

console = make_console()

load_path_app = typer.Typer(help="Manage the list of library directories", no_args_is_help=True)


def _load_path(ctx: typer.Context) -> LoadPath:
    return LoadPath(get_settings(ctx).load_path_file)


@load_path_app.command("add")
def add(
    ctx: typer.Context,
    directory: Path = typer.Argument(..., help="Directory to add"),
    append: bool = typer.Option(False, "--append", help="Add at the end instead of the front"),
    subdirs: bool = typer.Option(False, "--subdirs", help="Also add immediate subdirectories"),
) -> None:
    """Add a directory to the load-path."""
    with reported_errors(console):
        added = _load_path(ctx).add(directory, append=append, subdirs=subdirs)
    if not added:
        console.print(f"Already in load-path: {escape(str(directory))}")
        return
    for entry in added:
        console.print(f"Added to load-path: {escape(entry)}")


@load_path_app.command("remove")
def remove(ctx: typer.Context, directory: Path = typer.Argument(..., help="Directory to remove")) -> None:
    """Remove a directory from the load-path."""
    with reported_errors(console):
        removed = _load_path(ctx).remove(directory)
    if removed:
        console.print(f"Removed from load-path: {escape(str(directory))}")
    else:
        console.print(f"[yellow]Not in load-path: {escape(str(directory))}[/yellow]")


@load_path_app.command("list")
def list_entries(ctx: typer.Context) -> None:
    """Print load-path entries in lookup order."""
    with reported_errors(console):
        entries = _load_path(ctx).entries()
    if not entries:
        console.print("[yellow]Load-path is empty[/yellow]")
        return
    for entry in entries:
        marker = "" if Path(entry).is_dir() else "  [red](missing)[/red]"
        console.print(f"{escape(entry)}{marker}")


@load_path_app.command("export")
def export(ctx: typer.Context) -> None:
    """Print the load-path joined for use as PYTHONPATH."""
    with reported_errors(console):
        value = _load_path(ctx).export()
    typer.echo(value)


__all__ = ["load_path_app"]
