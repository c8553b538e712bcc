"""Color samples and channel access."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from colorfmt.errors import InvalidColorError


def is_compactable_channel(value: int) -> bool:
    """Check whether both nibbles of a byte are equal (0xee, 0x33, ...)."""
    return (value >> 4) == (value & 0xF)


def is_compactable(r: int, g: int, b: int) -> bool:
    """Check whether a color's six hex digits can be shortened to three."""
    return is_compactable_channel(r) and is_compactable_channel(g) and is_compactable_channel(b)


@dataclass(frozen=True)
class ColorSample:
    """A single sampled color with 8-bit channels.

    Attributes:
        a: Alpha channel
        r: Red channel
        g: Green channel
        b: Blue channel
    """

    a: int
    r: int
    g: int
    b: int

    WHITE: ClassVar[ColorSample]
    BLACK: ClassVar[ColorSample]
    TRANSPARENT: ClassVar[ColorSample]

    def __post_init__(self) -> None:
        for name in ("a", "r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 0xFF:
                raise ValueError(f"channel {name} out of range: {value!r}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> ColorSample:
        """Create an opaque sample."""
        return cls(0xFF, r, g, b)

    @classmethod
    def from_argb(cls, value: int) -> ColorSample:
        """Create a sample from a packed 0xAARRGGBB integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"packed color out of range: {value:#x}")
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    @property
    def argb(self) -> int:
        """Packed 0xAARRGGBB representation."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    @property
    def is_compactable(self) -> bool:
        """Check if the hex form can be written with three digits."""
        return is_compactable(self.r, self.g, self.b)


ColorSample.WHITE = ColorSample(0xFF, 0xFF, 0xFF, 0xFF)
ColorSample.BLACK = ColorSample(0xFF, 0, 0, 0)
ColorSample.TRANSPARENT = ColorSample(0, 0, 0, 0)


class Channel(Enum):
    """Visible color channel read by a template expansion."""

    R = "r"
    G = "g"
    B = "b"

    @classmethod
    def from_designator(cls, char: str) -> Channel:
        """Look up a channel by its one-letter designator.

        Raises:
            ValueError: If the designator is not r, g or b
        """
        return cls(char)

    def extract(self, sample: ColorSample) -> int:
        """Read this channel's value from a sample."""
        match self:
            case Channel.R:
                return sample.r
            case Channel.G:
                return sample.g
            case Channel.B:
                return sample.b


HEX_DIGITS = set("0123456789abcdefABCDEF")


def parse_sample(text: str) -> ColorSample:
    """Parse a color sample from text.

    Accepted forms:
        - ``#rgb``, ``#rrggbb``, ``#aarrggbb`` (the ``#`` is optional)
        - ``0xAARRGGBB`` packed integer
        - ``r,g,b`` decimal triple

    Args:
        text: Color text

    Returns:
        ColorSample (opaque unless alpha was given)

    Raises:
        InvalidColorError: If the text is not a recognised color

    Examples:
        >>> parse_sample("#ff00ff")
        ColorSample(a=255, r=255, g=0, b=255)
        >>> parse_sample("7,8,9").g
        8
    """
    value = text.strip()

    if "," in value:
        parts = [p.strip() for p in value.split(",")]
        if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
            raise InvalidColorError(text)
        channels = [int(p) for p in parts]
        if any(c > 0xFF for c in channels):
            raise InvalidColorError(text)
        return ColorSample.from_rgb(*channels)

    if value[:2].lower() == "0x":
        digits = value[2:]
        if not digits or len(digits) > 8 or not set(digits) <= HEX_DIGITS:
            raise InvalidColorError(text)
        return ColorSample.from_argb(int(digits, 16))

    digits = value[1:] if value.startswith("#") else value
    if not digits or not set(digits) <= HEX_DIGITS:
        raise InvalidColorError(text)

    if len(digits) == 3:
        r, g, b = (int(d * 2, 16) for d in digits)
        return ColorSample.from_rgb(r, g, b)
    if len(digits) == 6:
        return ColorSample.from_argb(0xFF000000 | int(digits, 16))
    if len(digits) == 8:
        return ColorSample.from_argb(int(digits, 16))

    raise InvalidColorError(text)
