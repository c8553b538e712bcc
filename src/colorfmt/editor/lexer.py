"""Custom lexer for template syntax highlighting."""

from __future__ import annotations

from collections.abc import Callable

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.formatted_text.utils import split_lines
from prompt_toolkit.lexers import Lexer

from colorfmt.core.template import DIGITS, MAX_PAD_DIGITS, Expansion, Span, scan
from colorfmt.errors import ParseError

STYLE_CLASSES = ("literal", "escape", "expansion", "pad", "base", "channel", "error")


class TemplateLexer(Lexer):
    """Lexer highlighting literals, escapes and expansion parts of a template.

    Text from the point where parsing fails onwards is styled as an error.
    """

    def __init__(self, styles: dict[str, str] | None = None) -> None:
        """Initialize the lexer.

        Args:
            styles: prompt_toolkit style strings keyed by class name
                (``literal``, ``escape``, ``pad``, ...)
        """
        self._styles = self._build_styles(styles or {})

    def _build_styles(self, styles: dict[str, str]) -> dict[str, str]:
        """Build prompt_toolkit style dictionary."""
        result: dict[str, str] = {}
        for name in STYLE_CLASSES:
            result[name] = styles.get(name, "")
        return result

    def get_style_dict(self) -> dict[str, str]:
        """Get the style dictionary for prompt_toolkit."""
        return self._styles

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        """Lex a document and return a function that returns styled text for each line."""
        lines = list(split_lines(self.style_text(document.text)))

        def get_line(line_number: int) -> StyleAndTextTuples:
            if line_number < len(lines):
                return lines[line_number]
            return []

        return get_line

    def style_text(self, text: str) -> StyleAndTextTuples:
        """Style a whole template string."""
        try:
            return self._style_spans(text, scan(text))
        except ParseError as e:
            # Everything before the failing element parses on its own
            styled = self._style_spans(text, scan(text[: e.position]))
            styled.append(("class:error", text[e.position :]))
            return styled

    def _style_spans(self, text: str, spans: list[Span]) -> StyleAndTextTuples:
        styled: StyleAndTextTuples = []

        for span in spans:
            raw = text[span.start : span.end]
            if isinstance(span.node, Expansion):
                styled.extend(self._style_expansion(raw, span.node))
            elif raw == "%%":
                styled.append(("class:escape", raw))
            else:
                styled.append(("class:literal", raw))

        return styled

    def _style_expansion(self, raw: str, node: Expansion) -> StyleAndTextTuples:
        """Split ``%{<pad><base><channel>}`` into its styled parts."""
        body = raw[2:-1]
        pad_len = 0
        if node.pad is not None:
            pad_len = 1
            while (
                pad_len < len(body) - 1
                and pad_len <= MAX_PAD_DIGITS
                and body[pad_len] in DIGITS
            ):
                pad_len += 1

        styled: StyleAndTextTuples = [("class:expansion", "%{")]
        if pad_len:
            styled.append(("class:pad", body[:pad_len]))
        if len(body) - 1 > pad_len:
            styled.append(("class:base", body[pad_len:-1]))
        styled.append(("class:channel", body[-1]))
        styled.append(("class:expansion", "}"))
        return styled
