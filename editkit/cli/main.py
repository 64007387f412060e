"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import typer

from editkit import __version__
from editkit.cli.commands.compile import compile_command
from editkit.cli.commands.history import repeat
from editkit.cli.commands.loadpath import load_path_app
from editkit.cli.commands.marks import mark_app
from editkit.cli.commands.system import lock, pdf, screenshot, transparency, volume
from editkit.cli.common import EXIT_CONFIG, AppContext, fail, make_console
from editkit.config.settings import load_settings
from editkit.exceptions import (
    ConfigValidationError,
    DirectoryNotFoundError,
    EditkitError,
    ExternalToolError,
    SchemaError,
)
from editkit.history import CommandHistory, should_record
from editkit.utils.logging import configure_logging, get_logger, resolve_level

app = typer.Typer(help="Small interactive commands for the desktop and the terminal", no_args_is_help=True)


def _version(value: bool) -> None:
    if value:
        typer.echo(f"editkit {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", envvar="EDITKIT_CONFIG", help="Path to config.yml"),
    version: bool = typer.Option(False, "--version", callback=_version, is_eager=True, help="Show version"),
) -> None:
    try:
        settings = load_settings(config)
    except ConfigValidationError as exc:
        fail(make_console(), f"Configuration error: {exc}", EXIT_CONFIG)
    logging.getLogger().setLevel(resolve_level(settings.log_level))
    ctx.obj = AppContext(settings=settings)


app.command()(repeat)
app.command("compile")(compile_command)
app.command()(transparency)
app.command(context_settings={"ignore_unknown_options": True})(volume)
app.command()(screenshot)
app.command()(lock)
app.command()(pdf)
app.add_typer(mark_app, name="mark")
app.add_typer(load_path_app, name="load-path")


log = get_logger(__name__, component="cli")


def _config_from_argv(argv: Sequence[str]) -> Optional[Path]:
    for idx, part in enumerate(argv):
        if part == "--config" and idx + 1 < len(argv):
            return Path(argv[idx + 1])
        if part.startswith("--config="):
            return Path(part.split("=", 1)[1])
    env_value = os.environ.get("EDITKIT_CONFIG")
    return Path(env_value) if env_value else None


def record_invocation(argv: Sequence[str]) -> bool:
    """Append a successful invocation to command history; returns whether it was kept."""

    if not should_record(argv):
        return False
    try:
        settings = load_settings(_config_from_argv(argv))
        CommandHistory(settings.command_history_file, limit=settings.history_limit).record(list(argv))
    except (EditkitError, OSError) as exc:
        log.warning(f"Could not record command history: {exc}")
        return False
    return True


def main() -> None:
    try:
        configure_logging(component="cli", level=os.environ.get("EDITKIT_LOG_LEVEL", "WARNING"))
    except ValueError:
        # the root callback reports the bad level as a configuration error
        configure_logging(component="cli")
    argv = sys.argv[1:]
    try:
        app(args=argv)
    except SystemExit as exc:
        if not exc.code:
            record_invocation(argv)
        raise
    except (ConfigValidationError, SchemaError) as exc:
        log.error(str(exc))
        sys.exit(1)
    except ExternalToolError as exc:
        log.error(f"External tool failed: {exc}")
        sys.exit(2)
    except (DirectoryNotFoundError, FileNotFoundError) as exc:
        log.error(f"Path not found: {exc}")
        sys.exit(3)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)


if __name__ == "__main__":
    # Use sys.exit to ensure proper exit code propagation under raw python invocation
    sys.exit(main())
