"""Configuration loader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from colorfmt.config.defaults import DEFAULT_CONFIG_YAML
from colorfmt.config.schema import Config
from colorfmt.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "colorfmt" / "config.yaml"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _parse_yaml(text: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"{source}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: top level must be a mapping")
    return data


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}
    with open(path) as f:
        return _parse_yaml(f.read(), str(path))


def build_config(data: dict[str, Any], source: str = "<config>") -> Config:
    """Merge data over the defaults and validate it.

    Raises:
        ConfigError: If the merged data fails validation
    """
    defaults = _parse_yaml(DEFAULT_CONFIG_YAML, "<defaults>")
    merged = deep_merge(defaults, data)
    try:
        return Config(**merged)
    except ValidationError as e:
        raise ConfigError(f"{source}: {e}") from e


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (default: ~/.config/colorfmt/config.yaml)

    Returns:
        Configuration merged over the built-in defaults

    Raises:
        ConfigError: If the file is not valid YAML or fails validation
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    elif isinstance(config_path, str):
        config_path = Path(config_path)

    config = build_config(load_yaml_file(config_path), str(config_path))
    if config_path.exists():
        logger.info(f"Config loaded from {config_path}")
    else:
        logger.debug(f"Using default config, {config_path} not found")
    return config


def load_config_from_string(yaml_string: str) -> Config:
    """Load configuration from a YAML string (useful for testing)."""
    return build_config(_parse_yaml(yaml_string, "<string>"))
