"""Entry points for turning user input into a formatter and rendering samples."""

from __future__ import annotations

from colorfmt.core.color import ColorSample
from colorfmt.core.presets import PresetFormat
from colorfmt.core.template import Template, parse

DEFAULT_PRESET = "hex"

Formatter = Template | PresetFormat


def parse_template(raw: str) -> Template:
    """Parse a user-supplied custom template.

    Raises:
        ParseError: If the template is malformed
    """
    return parse(raw)


def resolve_preset(name: str) -> PresetFormat:
    """Resolve one of the built-in preset names.

    Raises:
        UnknownFormatError: If the name is not a preset
    """
    return PresetFormat.from_name(name)


def resolve_formatter(preset: str | None = None, custom: str | None = None) -> Formatter:
    """Pick the formatter for a run.

    Args:
        preset: Preset name
        custom: Custom template string

    Returns:
        Parsed template if ``custom`` is given, otherwise the named preset
        (``hex`` when neither is given)

    Raises:
        ValueError: If both a preset and a custom template are given
        FormatError: If the chosen format is invalid
    """
    if preset is not None and custom is not None:
        raise ValueError("a preset and a custom template are mutually exclusive")
    if custom is not None:
        return parse_template(custom)
    return resolve_preset(preset if preset is not None else DEFAULT_PRESET)


def render(formatter: Formatter, sample: ColorSample) -> str:
    """Render a sample with a template or preset."""
    match formatter:
        case Template():
            return formatter.render(sample)
        case PresetFormat():
            return formatter.render(sample)
        case _:
            raise TypeError(f"not a formatter: {formatter!r}")
