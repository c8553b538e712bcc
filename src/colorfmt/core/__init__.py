"""Core functionality: color model, template engine, and presets."""

from colorfmt.core.color import Channel, ColorSample, is_compactable, parse_sample
from colorfmt.core.formatter import (
    DEFAULT_PRESET,
    Formatter,
    parse_template,
    render,
    resolve_formatter,
    resolve_preset,
)
from colorfmt.core.numbers import NumberBase, PadSpec, pad, render_number
from colorfmt.core.presets import PRESET_NAMES, HexCompaction, PresetFormat, PresetStyle
from colorfmt.core.template import Expansion, Literal, Template

__all__ = [
    "Channel",
    "ColorSample",
    "is_compactable",
    "parse_sample",
    "DEFAULT_PRESET",
    "Formatter",
    "parse_template",
    "render",
    "resolve_formatter",
    "resolve_preset",
    "NumberBase",
    "PadSpec",
    "pad",
    "render_number",
    "PRESET_NAMES",
    "HexCompaction",
    "PresetFormat",
    "PresetStyle",
    "Expansion",
    "Literal",
    "Template",
]
