"""Tests for the template validator and editor."""

import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from colorfmt.core.color import ColorSample
from colorfmt.editor.prompt import TemplateEditor
from colorfmt.editor.validator import TemplateValidator


class TestTemplateValidator:
    """Tests for TemplateValidator."""

    def test_valid(self):
        """Test that valid templates pass."""
        TemplateValidator().validate(Document("#%{02hr}%{02hg}%{02hb}"))

    def test_invalid(self):
        """Test that invalid templates point at the failing element."""
        with pytest.raises(ValidationError) as exc_info:
            TemplateValidator().validate(Document("ok %foo"))

        assert exc_info.value.cursor_position == 3
        assert exc_info.value.message == "invalid format string"


class TestTemplateEditor:
    """Tests for TemplateEditor preview."""

    def test_preview(self):
        """Test the live preview rendering."""
        editor = TemplateEditor(sample=ColorSample.from_rgb(1, 2, 3))

        assert editor.preview("%{r}-%{g}-%{b}") == [("", " 1-2-3 ")]

    def test_preview_error(self):
        """Test the preview of an invalid template."""
        editor = TemplateEditor(sample=ColorSample.BLACK)

        assert editor.preview("%{") == [("class:error", " invalid format string ")]

    def test_preview_sample_from_config(self, sample_config):
        """Test that the configured preview color is used by default."""
        editor = TemplateEditor("%{02hr}", config=sample_config)

        assert editor.sample == ColorSample.from_rgb(0x10, 0x20, 0x30)
        assert editor.preview("%{02hb}") == [("", " 30 ")]
