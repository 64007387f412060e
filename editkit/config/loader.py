"""Config file loading and precedence merging."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from editkit.exceptions import ConfigValidationError
from editkit.utils.logging import get_logger

log = get_logger(__name__, component="config")

Caster = Callable[[Any], Any]


def _load_yaml(path: Path) -> dict:
    """Load a YAML (or JSON) mapping from ``path``."""

    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    text = path.read_text()
    try:
        if path.suffix.lower() == ".json":
            content = json.loads(text) if text.strip() else {}
        else:
            content = yaml.safe_load(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigValidationError(f"Could not parse config file {path}: {exc}") from exc
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping")
    return content


def _cast(name: str, value: Any, casters: Mapping[str, Caster]) -> Any:
    caster = casters.get(name)
    if caster is None or value is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {name}: {value!r}") from exc


def load_config_with_precedence(
    *,
    config_path: Optional[Path],
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Optional[Mapping[str, Caster]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Merge settings with precedence CLI > environment > config file > defaults.

    Only keys present in ``defaults`` are considered; unknown file keys are
    ignored with a warning. CLI values of ``None`` do not override.
    """

    casters = casters or {}
    env = os.environ if environ is None else environ
    merged: Dict[str, Any] = dict(defaults)

    if config_path is not None:
        file_values = _load_yaml(Path(config_path))
        unknown = sorted(set(file_values) - set(defaults))
        if unknown:
            log.warning(f"Ignoring unknown config keys: {', '.join(unknown)}", extra={"path": str(config_path)})
        for key in defaults:
            if key in file_values:
                merged[key] = _cast(key, file_values[key], casters)

    for key in defaults:
        env_key = f"{env_prefix}{key.upper()}"
        if env_key in env:
            merged[key] = _cast(key, env[env_key], casters)

    for key, value in cli_values.items():
        if key in defaults and value is not None:
            merged[key] = _cast(key, value, casters)

    return merged


__all__ = ["load_config_with_precedence", "_load_yaml"]
