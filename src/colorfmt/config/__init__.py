"""Configuration loading and schema definitions."""

from colorfmt.config.loader import load_config, load_config_from_string
from colorfmt.config.schema import Config, EditorConfig

__all__ = [
    "Config",
    "EditorConfig",
    "load_config",
    "load_config_from_string",
]
