"""Interactive template editor using prompt_toolkit."""

from __future__ import annotations

import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.styles import Style

from colorfmt.config.schema import Config
from colorfmt.core.color import ColorSample
from colorfmt.core.formatter import parse_template
from colorfmt.editor.lexer import TemplateLexer
from colorfmt.editor.validator import TemplateValidator
from colorfmt.errors import ParseError

logger = logging.getLogger(__name__)


class TemplateEditor:
    """Single-line template editor with highlighting and a live preview."""

    def __init__(
        self,
        template: str = "",
        sample: ColorSample | None = None,
        config: Config | None = None,
    ) -> None:
        """Initialize the editor.

        Args:
            template: Initial template text
            sample: Color rendered in the preview toolbar
            config: Configuration object (defaults if None)
        """
        self.config = config or Config()
        self.sample = sample or self.config.editor.get_preview_sample()
        self._initial_text = template

        self.lexer = TemplateLexer(self.config.editor.styles)
        self.validator = TemplateValidator()
        self.session: PromptSession | None = None

    def _create_style(self) -> Style:
        """Create prompt_toolkit style from the lexer classes."""
        return Style.from_dict(self.lexer.get_style_dict())

    def preview(self, text: str) -> StyleAndTextTuples:
        """Render the current text against the preview sample."""
        try:
            rendered = parse_template(text).render(self.sample)
        except ParseError as e:
            return [("class:error", f" {e} ")]
        return [("", f" {rendered} ")]

    def run(self) -> str:
        """Run the editor and return the accepted template."""
        self.session = PromptSession(
            message="template> ",
            lexer=self.lexer,
            validator=self.validator,
            validate_while_typing=False,
            style=self._create_style(),
        )
        result = self.session.prompt(
            default=self._initial_text,
            bottom_toolbar=lambda: self.preview(self.session.default_buffer.text),
        )
        logger.debug(f"Template accepted: {result!r}")
        return result


def edit_template(
    template: str = "",
    sample: ColorSample | None = None,
    config: Config | None = None,
) -> str:
    """Edit a template interactively.

    Args:
        template: Initial template text
        sample: Color rendered in the preview
        config: Configuration object

    Returns:
        The accepted template (always valid)
    """
    return TemplateEditor(template, sample, config).run()
