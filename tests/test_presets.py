"""Tests for the presets module."""

import pytest

from colorfmt.core.color import ColorSample
from colorfmt.core.presets import (
    PRESET_NAMES,
    PRESETS,
    HexCompaction,
    PresetFormat,
    PresetStyle,
)
from colorfmt.errors import UnknownFormatError


class TestFromName:
    """Tests for PresetFormat.from_name."""

    def test_table(self):
        """Test the six built-in names."""
        assert PresetFormat.from_name("hex") == PresetFormat(PresetStyle.LOWERCASE_HEX, HexCompaction.FULL)
        assert PresetFormat.from_name("HEX") == PresetFormat(PresetStyle.UPPERCASE_HEX, HexCompaction.FULL)
        assert PresetFormat.from_name("hex!") == PresetFormat(PresetStyle.LOWERCASE_HEX, HexCompaction.COMPACT)
        assert PresetFormat.from_name("HEX!") == PresetFormat(PresetStyle.UPPERCASE_HEX, HexCompaction.COMPACT)
        assert PresetFormat.from_name("plain") == PresetFormat(PresetStyle.PLAIN)
        assert PresetFormat.from_name("rgb") == PresetFormat(PresetStyle.RGB)

    def test_names_in_order(self):
        """Test the exported name list."""
        assert PRESET_NAMES == ("hex", "HEX", "hex!", "HEX!", "plain", "rgb")

    @pytest.mark.parametrize("name", ["", "Hex", "RGB", "Plain", "hex!!", "css", " hex"])
    def test_unknown(self, name):
        """Test that lookups are exact and case-sensitive."""
        with pytest.raises(UnknownFormatError) as exc_info:
            PresetFormat.from_name(name)

        assert str(exc_info.value) == "invalid format"
        assert exc_info.value.name == name

    def test_name_round_trip(self):
        """Test that every preset knows its own name."""
        for name, preset in PRESETS.items():
            assert preset.name == name


class TestRender:
    """Tests for preset rendering."""

    def test_hex_full(self, magenta):
        """Test six-digit lowercase hex."""
        assert PRESETS["hex"].render(magenta) == "#ff00ff"
        assert PRESETS["hex"].render(ColorSample.from_rgb(1, 2, 3)) == "#010203"

    def test_hex_upper_full(self, magenta):
        """Test six-digit uppercase hex."""
        assert PRESETS["HEX"].render(magenta) == "#FF00FF"

    def test_hex_compact(self):
        """Test that compactable colors shrink to three digits."""
        grey = ColorSample.from_rgb(0xEE, 0xEE, 0xEE)

        assert PRESETS["hex!"].render(grey) == "#eee"
        assert PRESETS["hex"].render(grey) == "#eeeeee"

    def test_hex_upper_compact(self):
        """Test uppercase compact form."""
        assert PRESETS["HEX!"].render(ColorSample.from_rgb(0xAA, 0x00, 0xFF)) == "#A0F"

    def test_compact_falls_back(self):
        """Test that non-compactable colors keep six digits."""
        color = ColorSample.from_rgb(0xF7, 0xF7, 0xF7)

        assert PRESETS["hex!"].render(color) == "#f7f7f7"
        assert PRESETS["HEX!"].render(color) == "#F7F7F7"

    def test_compact_ignores_alpha(self):
        """Test that alpha does not affect compaction."""
        assert PRESETS["hex!"].render(ColorSample(0x12, 0x33, 0x44, 0x55)) == "#345"

    def test_plain(self, magenta):
        """Test semicolon separated decimal."""
        assert PRESETS["plain"].render(magenta) == "255;0;255"

    def test_rgb(self):
        """Test CSS-like rgb()."""
        assert PRESETS["rgb"].render(ColorSample.from_rgb(7, 80, 255)) == "rgb(7, 80, 255)"
