"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from colorfmt.config.loader import load_config_from_string
from colorfmt.config.schema import Config
from colorfmt.core.color import ColorSample


@pytest.fixture
def sample_config() -> Config:
    """Sample configuration for testing."""
    yaml_content = """
format: HEX!

templates:
  css: "rgb(%{r}, %{g}, %{b})"
  padded: "%{ 3r}|%{ 3g}|%{ 3b}"
  bits: "%{08Br}"

editor:
  preview_sample: "#102030"
  styles:
    channel: "ansired bold"
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def empty_config() -> Config:
    """Empty configuration for testing."""
    return Config()


@pytest.fixture
def magenta() -> ColorSample:
    """Opaque #ff00ff."""
    return ColorSample(0xFF, 255, 0, 255)


@pytest.fixture
def missing_config(tmp_path: Path) -> list[str]:
    """CLI arguments pointing at a config file that does not exist."""
    return ["--config", str(tmp_path / "missing.yaml")]
