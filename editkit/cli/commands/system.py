"""CLI commands wrapping desktop utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from editkit.cli.common import get_settings, make_console, report_result, reported_errors
from editkit.shell.utilities import (
    convert_to_pdf,
    lock_screen,
    set_transparency,
    set_volume,
    take_screenshot,
)

console = make_console()


def transparency(
    ctx: typer.Context,
    opacity: float = typer.Argument(..., help="Opacity of the active window, 0.0 to 1.0"),
) -> None:
    """Set the transparency of the active window."""
    settings = get_settings(ctx)
    with reported_errors(console):
        result = set_transparency(opacity, tool=settings.transparency_tool, timeout=settings.process_timeout)
    report_result(console, result, f"Opacity set to {opacity:.2f}", settings.transparency_tool)


def volume(
    ctx: typer.Context,
    level: str = typer.Argument(..., help="0-100, +N, -N, mute, unmute or toggle"),
) -> None:
    """Change the output volume."""
    settings = get_settings(ctx)
    with reported_errors(console):
        result = set_volume(
            level,
            control=settings.volume_control,
            mixer=settings.mixer,
            timeout=settings.process_timeout,
        )
    report_result(console, result, f"Volume: {level}", settings.mixer)


def screenshot(
    ctx: typer.Context,
    directory: Optional[Path] = typer.Option(None, "--dir", help="Target directory (default: screenshot_dir)"),
    delay: int = typer.Option(0, "--delay", min=0, help="Seconds to wait before capturing"),
    select: bool = typer.Option(False, "--select", help="Select a window or region interactively"),
) -> None:
    """Capture the screen to a timestamped PNG."""
    settings = get_settings(ctx)
    with reported_errors(console):
        result, target = take_screenshot(
            directory or settings.screenshot_dir,
            tool=settings.screenshot_tool,
            delay=delay,
            select=select,
            timeout=settings.process_timeout,
        )
    report_result(console, result, f"Screenshot saved to {target}", settings.screenshot_tool)


def lock(ctx: typer.Context) -> None:
    """Lock the screen."""
    settings = get_settings(ctx)
    with reported_errors(console):
        result = lock_screen(settings.lock_command, timeout=settings.process_timeout)
    report_result(console, result, "Screen locked", settings.lock_command.split()[0])


def pdf(
    ctx: typer.Context,
    source: Path = typer.Argument(..., help="Document to convert"),
    outdir: Optional[Path] = typer.Option(None, "--outdir", help="Directory for the PDF (default: next to source)"),
) -> None:
    """Convert a document to PDF."""
    settings = get_settings(ctx)
    with reported_errors(console):
        result, target = convert_to_pdf(
            source,
            outdir=outdir,
            converter=settings.pdf_converter,
            timeout=settings.process_timeout,
        )
    report_result(console, result, f"Wrote {target}", settings.pdf_converter)


__all__ = ["lock", "pdf", "screenshot", "transparency", "volume"]
