"""Built-in named output formats."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from colorfmt.core.color import ColorSample
from colorfmt.errors import UnknownFormatError

logger = logging.getLogger(__name__)


class PresetStyle(Enum):
    """Output style of a preset."""

    LOWERCASE_HEX = auto()
    UPPERCASE_HEX = auto()
    PLAIN = auto()
    RGB = auto()


class HexCompaction(Enum):
    """Whether a hex preset shortens #rrggbb to #rgb when possible."""

    FULL = auto()
    COMPACT = auto()


@dataclass(frozen=True)
class PresetFormat:
    """One of the built-in named formats.

    Attributes:
        style: Output style
        compaction: Hex compaction mode (only meaningful for hex styles)
    """

    style: PresetStyle
    compaction: HexCompaction = HexCompaction.FULL

    @classmethod
    def from_name(cls, name: str) -> PresetFormat:
        """Look up a preset by its exact, case-sensitive name.

        Raises:
            UnknownFormatError: If the name is not a built-in preset
        """
        try:
            preset = PRESETS[name]
        except KeyError:
            raise UnknownFormatError(name) from None
        logger.debug(f"Resolved preset {name!r}")
        return preset

    @property
    def name(self) -> str:
        """Name this preset is selected by."""
        for name, preset in PRESETS.items():
            if preset == self:
                return name
        raise LookupError(self)

    def render(self, sample: ColorSample) -> str:
        """Render a sample in this preset's style."""
        r, g, b = sample.r, sample.g, sample.b
        compact = self.compaction is HexCompaction.COMPACT and sample.is_compactable

        match self.style:
            case PresetStyle.LOWERCASE_HEX if compact:
                return f"#{r & 0xF:x}{g & 0xF:x}{b & 0xF:x}"
            case PresetStyle.LOWERCASE_HEX:
                return f"#{r:02x}{g:02x}{b:02x}"
            case PresetStyle.UPPERCASE_HEX if compact:
                return f"#{r & 0xF:X}{g & 0xF:X}{b & 0xF:X}"
            case PresetStyle.UPPERCASE_HEX:
                return f"#{r:02X}{g:02X}{b:02X}"
            case PresetStyle.PLAIN:
                return f"{r};{g};{b}"
            case PresetStyle.RGB:
                return f"rgb({r}, {g}, {b})"


PRESETS: dict[str, PresetFormat] = {
    "hex": PresetFormat(PresetStyle.LOWERCASE_HEX, HexCompaction.FULL),
    "HEX": PresetFormat(PresetStyle.UPPERCASE_HEX, HexCompaction.FULL),
    "hex!": PresetFormat(PresetStyle.LOWERCASE_HEX, HexCompaction.COMPACT),
    "HEX!": PresetFormat(PresetStyle.UPPERCASE_HEX, HexCompaction.COMPACT),
    "plain": PresetFormat(PresetStyle.PLAIN),
    "rgb": PresetFormat(PresetStyle.RGB),
}

PRESET_NAMES: tuple[str, ...] = tuple(PRESETS)
