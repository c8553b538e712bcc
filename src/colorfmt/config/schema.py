"""Pydantic models for configuration schema."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from colorfmt.core.color import ColorSample, parse_sample
from colorfmt.core.formatter import Formatter, parse_template, resolve_preset
from colorfmt.core.presets import PRESET_NAMES
from colorfmt.errors import ConfigError, FormatError, InvalidColorError


class EditorConfig(BaseModel):
    """Interactive template editor options."""

    preview_sample: str = Field(
        default="#808080", description="Color rendered in the live preview"
    )
    styles: dict[str, str] = Field(
        default_factory=dict,
        description="prompt_toolkit style per lexer class (literal, escape, pad, ...)",
    )

    @field_validator("preview_sample")
    @classmethod
    def check_preview_sample(cls, v: str) -> str:
        """Reject preview colors that cannot be parsed."""
        try:
            parse_sample(v)
        except InvalidColorError as e:
            raise ValueError(str(e)) from e
        return v

    def get_preview_sample(self) -> ColorSample:
        return parse_sample(self.preview_sample)


class Config(BaseModel):
    """Top-level configuration."""

    format: str = Field(default="hex", description="Default preset name")
    custom: str | None = Field(
        default=None, description="Default custom template (takes precedence over format)"
    )
    templates: dict[str, str] = Field(
        default_factory=dict, description="Named custom templates"
    )
    editor: EditorConfig = Field(default_factory=EditorConfig)

    @field_validator("format")
    @classmethod
    def check_format(cls, v: str) -> str:
        """Reject unknown preset names at load time."""
        if v not in PRESET_NAMES:
            raise ValueError(f"invalid format: {v!r} (expected one of {', '.join(PRESET_NAMES)})")
        return v

    @field_validator("custom")
    @classmethod
    def check_custom(cls, v: str | None) -> str | None:
        """Reject malformed default templates at load time."""
        if v is not None:
            _check_template(v)
        return v

    @field_validator("templates")
    @classmethod
    def check_templates(cls, v: dict[str, str]) -> dict[str, str]:
        """Reject malformed named templates at load time."""
        for template in v.values():
            _check_template(template)
        return v

    @model_validator(mode="after")
    def check_template_names(self) -> Config:
        """Named templates must not hide preset names."""
        clashes = sorted(set(self.templates) & set(PRESET_NAMES))
        if clashes:
            raise ValueError(f"template names clash with presets: {', '.join(clashes)}")
        return self

    def get_formatter(self, name: str | None = None) -> Formatter:
        """Get a named template, or the configured default formatter.

        Raises:
            ConfigError: If no template has the given name
        """
        if name is not None:
            if name not in self.templates:
                raise ConfigError(f"unknown template: {name}")
            return parse_template(self.templates[name])
        if self.custom is not None:
            return parse_template(self.custom)
        return resolve_preset(self.format)


def _check_template(template: str) -> None:
    try:
        parse_template(template)
    except FormatError as e:
        raise ValueError(f"{e}: {template!r}") from e
