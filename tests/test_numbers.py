"""Tests for the numbers module."""

import pytest

from colorfmt.core.numbers import NumberBase, PadSpec, pad, render_number


class TestRenderNumber:
    """Tests for render_number function."""

    def test_bases(self):
        """Test each base renders the minimum digits."""
        assert render_number(255, NumberBase.LOWERCASE_HEX) == "ff"
        assert render_number(255, NumberBase.UPPERCASE_HEX) == "FF"
        assert render_number(255, NumberBase.DECIMAL) == "255"
        assert render_number(255, NumberBase.OCTAL) == "377"
        assert render_number(255, NumberBase.BINARY) == "11111111"

    def test_no_zero_extension(self):
        """Test that small values are not extended to a byte width."""
        assert render_number(3, NumberBase.BINARY) == "11"
        assert render_number(10, NumberBase.LOWERCASE_HEX) == "a"

    def test_zero(self):
        """Test that zero renders as a single digit."""
        for base in NumberBase:
            assert render_number(0, base) == "0"

    def test_default_is_decimal(self):
        """Test that decimal is the default base."""
        assert render_number(42) == "42"


class TestPad:
    """Tests for padding."""

    def test_pads_left(self):
        """Test that short text is padded on the left."""
        assert pad("7", PadSpec("-", 4)) == "---7"

    def test_never_truncates(self):
        """Test that long text is left unchanged."""
        assert pad("11111111", PadSpec("0", 2)) == "11111111"
        assert pad("ff", PadSpec("0", 0)) == "ff"

    def test_exact_width(self):
        """Test that text already at the width is unchanged."""
        assert pad("ab", PadSpec("x", 2)) == "ab"

    def test_counts_characters(self):
        """Test that multi-byte fill characters count as one."""
        assert pad("1", PadSpec("é", 3)) == "éé1"

    def test_no_spec(self):
        """Test that a missing spec leaves text unchanged."""
        assert pad("12", None) == "12"

    def test_length_property(self):
        """Test that output length is max(text length, width)."""
        for text in ("", "1", "12345"):
            for width in (0, 1, 3, 5, 8):
                assert len(pad(text, PadSpec("*", width))) == max(len(text), width)


class TestPadSpec:
    """Tests for PadSpec validation."""

    def test_width_bounds(self):
        """Test that widths outside 16 bits are rejected."""
        PadSpec("0", 0)
        PadSpec("0", 65535)
        with pytest.raises(ValueError):
            PadSpec("0", 65536)
        with pytest.raises(ValueError):
            PadSpec("0", -1)

    def test_single_character_fill(self):
        """Test that fill must be exactly one character."""
        with pytest.raises(ValueError):
            PadSpec("", 2)
        with pytest.raises(ValueError):
            PadSpec("ab", 2)
