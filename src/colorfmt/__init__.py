"""colorfmt - render sampled colors with presets or custom templates."""

from colorfmt.core import (
    ColorSample,
    Template,
    PresetFormat,
    parse_sample,
    parse_template,
    render,
    resolve_formatter,
    resolve_preset,
)
from colorfmt.errors import (
    ConfigError,
    FormatError,
    InvalidColorError,
    ParseError,
    UnknownFormatError,
)

__version__ = "0.1.0"

__all__ = [
    "ColorSample",
    "Template",
    "PresetFormat",
    "parse_sample",
    "parse_template",
    "render",
    "resolve_formatter",
    "resolve_preset",
    "ConfigError",
    "FormatError",
    "InvalidColorError",
    "ParseError",
    "UnknownFormatError",
]
