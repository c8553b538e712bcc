"""Number rendering in the bases supported by templates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_PAD_WIDTH = 0xFFFF


class NumberBase(Enum):
    """Base used to render a channel value.

    The value of each member is its designator in template syntax.
    """

    LOWERCASE_HEX = "h"
    UPPERCASE_HEX = "H"
    DECIMAL = "d"
    OCTAL = "o"
    BINARY = "B"

    @property
    def spec(self) -> str:
        """Format spec passed to the built-in ``format``."""
        return _FORMAT_SPECS[self]


_FORMAT_SPECS = {
    NumberBase.LOWERCASE_HEX: "x",
    NumberBase.UPPERCASE_HEX: "X",
    NumberBase.DECIMAL: "d",
    NumberBase.OCTAL: "o",
    NumberBase.BINARY: "b",
}


@dataclass(frozen=True)
class PadSpec:
    """Left-padding instruction.

    Attributes:
        fill: Single fill character
        width: Minimum width of the rendered text
    """

    fill: str
    width: int

    def __post_init__(self) -> None:
        if len(self.fill) != 1:
            raise ValueError(f"fill must be a single character: {self.fill!r}")
        if not 0 <= self.width <= MAX_PAD_WIDTH:
            raise ValueError(f"pad width out of range: {self.width}")


def render_number(value: int, base: NumberBase = NumberBase.DECIMAL) -> str:
    """Render a value with the minimum number of digits.

    Examples:
        >>> render_number(3, NumberBase.BINARY)
        '11'
        >>> render_number(255, NumberBase.UPPERCASE_HEX)
        'FF'
    """
    return format(value, base.spec)


def pad(text: str, spec: PadSpec | None) -> str:
    """Left-pad text to the width in ``spec``. Longer text is left as is."""
    if spec is None or len(text) >= spec.width:
        return text
    return spec.fill * (spec.width - len(text)) + text
