"""Configuration loading with CLI > env > file > default precedence."""

from editkit.config.loader import load_config_with_precedence
from editkit.config.settings import Settings, default_config_path, load_settings

__all__ = ["Settings", "default_config_path", "load_config_with_precedence", "load_settings"]
