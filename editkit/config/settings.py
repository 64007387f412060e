"""Application settings schema and loading."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from editkit.config.loader import load_config_with_precedence
from editkit.exceptions import ConfigValidationError

ENV_PREFIX = "EDITKIT_"


def _xdg_dir(variable: str, fallback: str) -> Path:
    base = os.environ.get(variable)
    return Path(base) if base else Path.home() / fallback


def default_config_path() -> Optional[Path]:
    """Return ``$XDG_CONFIG_HOME/editkit/config.yml`` when it exists."""
    candidate = _xdg_dir("XDG_CONFIG_HOME", ".config") / "editkit" / "config.yml"
    return candidate if candidate.exists() else None


def _optional_float(value: Any) -> Optional[float]:
    if value is None or str(value).strip().lower() in {"", "none", "null"}:
        return None
    return float(value)


def _optional_str(value: Any) -> Optional[str]:
    if value is None or not str(value).strip():
        return None
    return str(value)


@dataclass(slots=True)
class Settings:
    state_dir: Path = field(default_factory=lambda: _xdg_dir("XDG_DATA_HOME", ".local/share") / "editkit")
    history_limit: int = 100
    mark_ring_max: int = 16
    shell: str = "/bin/sh"
    editor: Optional[str] = field(default_factory=lambda: os.environ.get("EDITOR"))
    mixer: str = "amixer"
    volume_control: str = "Master"
    transparency_tool: str = "transset"
    screenshot_tool: str = "scrot"
    screenshot_dir: Path = field(default_factory=lambda: Path.home() / "Pictures")
    pdf_converter: str = "libreoffice"
    lock_command: str = "xscreensaver-command -lock"
    process_timeout: Optional[float] = 30.0
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.history_limit <= 0:
            raise ConfigValidationError("history_limit must be > 0")
        if self.mark_ring_max <= 0:
            raise ConfigValidationError("mark_ring_max must be > 0")
        if self.process_timeout is not None and self.process_timeout <= 0:
            raise ConfigValidationError("process_timeout must be positive when set")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigValidationError(f"invalid log_level: {self.log_level}")
        for name in ("shell", "mixer", "volume_control", "transparency_tool", "screenshot_tool", "pdf_converter"):
            if not getattr(self, name).strip():
                raise ConfigValidationError(f"{name} must not be empty")
        if not self.lock_command.strip():
            raise ConfigValidationError("lock_command must not be empty")

    @property
    def command_history_file(self) -> Path:
        return self.state_dir / "command-history.json"

    @property
    def compile_history_file(self) -> Path:
        return self.state_dir / "compile-history.json"

    @property
    def mark_ring_file(self) -> Path:
        return self.state_dir / "mark-ring.json"

    @property
    def load_path_file(self) -> Path:
        return self.state_dir / "load-path.json"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        return cls(**data)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["state_dir"] = str(self.state_dir)
        data["screenshot_dir"] = str(self.screenshot_dir)
        return data


CASTERS = {
    "state_dir": lambda v: Path(v).expanduser(),
    "history_limit": int,
    "mark_ring_max": int,
    "shell": str,
    "editor": _optional_str,
    "mixer": str,
    "volume_control": str,
    "transparency_tool": str,
    "screenshot_tool": str,
    "screenshot_dir": lambda v: Path(v).expanduser(),
    "pdf_converter": str,
    "lock_command": str,
    "process_timeout": _optional_float,
    "log_level": str,
}


def load_settings(
    config_path: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build :class:`Settings` from defaults, config file, ``EDITKIT_*`` env and overrides."""

    defaults = Settings().to_dict()
    merged = load_config_with_precedence(
        config_path=config_path if config_path is not None else default_config_path(),
        env_prefix=ENV_PREFIX,
        cli_values=dict(overrides or {}),
        defaults=defaults,
        casters=CASTERS,
        environ=environ,
    )
    merged["state_dir"] = CASTERS["state_dir"](merged["state_dir"])
    merged["screenshot_dir"] = CASTERS["screenshot_dir"](merged["screenshot_dir"])
    return Settings.from_dict(merged)


__all__ = ["Settings", "default_config_path", "load_settings", "ENV_PREFIX"]
