"""Wrappers for desktop utilities: transparency, volume, screenshots, lock, PDF."""

from __future__ import annotations

import re
import shlex
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from editkit.exceptions import ConfigValidationError, DirectoryNotFoundError
from editkit.shell.process import ProcessResult, invoke

_RELATIVE_VOLUME = re.compile(r"^([+-])(\d{1,3})$")
_VOLUME_KEYWORDS = {"mute", "unmute", "toggle"}


def set_transparency(opacity: float, *, tool: str = "transset", timeout: Optional[float] = None) -> ProcessResult:
    """Set the opacity of the active window (0 = invisible, 1 = opaque)."""
    if not 0.0 <= opacity <= 1.0:
        raise ConfigValidationError("opacity must be between 0 and 1")
    return invoke(tool, ["--actual", f"{opacity:.2f}"], timeout=timeout)


def volume_argument(level: str) -> str:
    """Translate ``50``, ``+5``, ``-5``, ``mute``... into an amixer argument."""

    value = level.strip().lower()
    if value in _VOLUME_KEYWORDS:
        return value
    relative = _RELATIVE_VOLUME.match(value)
    if relative:
        sign, amount = relative.groups()
        return f"{int(amount)}%{sign}"
    if value.isdigit() and 0 <= int(value) <= 100:
        return f"{int(value)}%"
    raise ConfigValidationError(
        f"Invalid volume level '{level}'. Use 0-100, +N, -N, mute, unmute or toggle"
    )


def set_volume(
    level: str,
    *,
    control: str = "Master",
    mixer: str = "amixer",
    timeout: Optional[float] = None,
) -> ProcessResult:
    return invoke(mixer, ["-q", "set", control, volume_argument(level)], timeout=timeout)


def screenshot_path(directory: Path, now: Optional[datetime] = None) -> Path:
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    return directory / f"screenshot-{stamp}.png"


def take_screenshot(
    directory: Path,
    *,
    tool: str = "scrot",
    delay: int = 0,
    select: bool = False,
    timeout: Optional[float] = None,
) -> Tuple[ProcessResult, Path]:
    """Capture the screen into ``directory``; returns the result and target file."""

    directory = Path(directory).expanduser()
    if not directory.is_dir():
        raise DirectoryNotFoundError(f"Screenshot directory not found: {directory}")
    if delay < 0:
        raise ConfigValidationError("delay must be >= 0")

    target = screenshot_path(directory)
    args: list[str] = []
    if delay:
        args += ["--delay", str(delay)]
    if select:
        args.append("--select")
    args.append(str(target))
    budget = timeout + delay if timeout is not None else None
    return invoke(tool, args, timeout=budget), target


def convert_to_pdf(
    source: Path,
    *,
    outdir: Optional[Path] = None,
    converter: str = "libreoffice",
    timeout: Optional[float] = None,
) -> Tuple[ProcessResult, Path]:
    """Convert a document to PDF next to it (or into ``outdir``)."""

    source = Path(source).expanduser()
    if not source.is_file():
        raise FileNotFoundError(f"File not found: {source}")
    target_dir = Path(outdir).expanduser() if outdir is not None else source.parent
    if not target_dir.is_dir():
        raise DirectoryNotFoundError(f"Output directory not found: {target_dir}")

    args = ["--headless", "--convert-to", "pdf", "--outdir", str(target_dir), str(source)]
    return invoke(converter, args, timeout=timeout), target_dir / f"{source.stem}.pdf"


def lock_screen(command: str = "xscreensaver-command -lock", *, timeout: Optional[float] = None) -> ProcessResult:
    parts = shlex.split(command)
    if not parts:
        raise ConfigValidationError("lock_command must not be empty")
    return invoke(parts[0], parts[1:], timeout=timeout)


__all__ = [
    "convert_to_pdf",
    "lock_screen",
    "screenshot_path",
    "set_transparency",
    "set_volume",
    "take_screenshot",
    "volume_argument",
]
