"""Exception types raised while resolving formats and color samples."""

from __future__ import annotations


class FormatError(Exception):
    """Base class for format resolution failures.

    Attributes:
        value: The offending user input (template string or preset name)
    """

    message = "invalid format"

    def __init__(self, value: str) -> None:
        super().__init__(self.message)
        self.value = value

    def __str__(self) -> str:
        return self.message


class ParseError(FormatError):
    """A custom template does not match the template grammar.

    The message never carries more detail than ``invalid format string``;
    ``position`` is the offset where parsing stopped and is only meant for
    editors that want to underline the rest of the input.
    """

    message = "invalid format string"

    def __init__(self, template: str, position: int = 0) -> None:
        super().__init__(template)
        self.position = position

    @property
    def template(self) -> str:
        return self.value


class UnknownFormatError(FormatError):
    """A preset name is not one of the built-in formats."""

    message = "invalid format"

    @property
    def name(self) -> str:
        return self.value


class InvalidColorError(ValueError):
    """A color sample given as text could not be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid color: {text!r}")
        self.text = text


class ConfigError(Exception):
    """Configuration file could not be read or failed validation."""
