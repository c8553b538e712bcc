"""Custom template parser and renderer.

Template syntax::

    template  := (literal | expansion)*
    literal   := one or more characters other than '%'
    expansion := "%%" | "%{" pad? base? channel "}"
    pad       := any character followed by 1-5 digits (fill, width)
    base      := "h" | "H" | "o" | "B" | "d"
    channel   := "r" | "g" | "b"

Examples::

    #%{02hr}%{02hg}%{02hb}     -> #ff00ff
    Green: %{-4g}              -> Green: ---7
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from colorfmt.core.color import Channel, ColorSample
from colorfmt.core.numbers import MAX_PAD_WIDTH, NumberBase, PadSpec, pad, render_number
from colorfmt.errors import ParseError

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
MAX_PAD_DIGITS = 5
BASES = {base.value: base for base in NumberBase}


@dataclass(frozen=True)
class Literal:
    """Text copied to the output unchanged."""

    text: str


@dataclass(frozen=True)
class Expansion:
    """A ``%{...}`` placeholder replaced by a channel value.

    Attributes:
        channel: Channel to read
        base: Base to render the value in
        pad: Optional left-padding
    """

    channel: Channel
    base: NumberBase = NumberBase.DECIMAL
    pad: PadSpec | None = None

    def render(self, sample: ColorSample) -> str:
        return pad(render_number(self.channel.extract(sample), self.base), self.pad)


TemplateNode = Literal | Expansion


@dataclass(frozen=True)
class Span:
    """A parsed node and its position in the source string."""

    node: TemplateNode
    start: int
    end: int


@dataclass(frozen=True)
class Template:
    """A parsed custom template, reusable across samples.

    Attributes:
        nodes: Literal and expansion nodes in output order
        source: The string the template was parsed from
    """

    nodes: tuple[TemplateNode, ...] = ()
    source: str = field(default="", compare=False)

    def render(self, sample: ColorSample) -> str:
        """Render the template against a color sample."""
        parts: list[str] = []
        for node in self.nodes:
            match node:
                case Literal(text=text):
                    parts.append(text)
                case Expansion():
                    parts.append(node.render(sample))
        return "".join(parts)

    def __str__(self) -> str:
        return self.source


class _Backtrack(Exception):
    """An optional element did not match; restore the position and move on."""


class TemplateParser:
    """Recursive descent parser for template strings."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.start = 0

    def scan(self) -> list[Span]:
        """Parse the whole input into positioned nodes.

        Raises:
            ParseError: If the input does not match the grammar
        """
        spans: list[Span] = []

        while self.pos < self.length:
            start = self.start = self.pos
            if self.text[self.pos] == "%":
                node = self._parse_expansion()
            else:
                node = self._parse_literal()
            spans.append(Span(node, start, self.pos))

        return spans

    def parse(self) -> Template:
        """Parse the whole input into a Template."""
        nodes = tuple(span.node for span in self.scan())
        return Template(nodes=nodes, source=self.text)

    def _fail(self) -> ParseError:
        return ParseError(self.text, self.start)

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < self.length else ""

    def _parse_literal(self) -> Literal:
        end = self.text.find("%", self.pos)
        if end == -1:
            end = self.length
        text = self.text[self.pos : end]
        self.pos = end
        return Literal(text)

    def _parse_expansion(self) -> TemplateNode:
        # Escape is checked before an expansion body
        if self._peek(1) == "%":
            self.pos += 2
            return Literal("%")

        if self._peek(1) != "{":
            raise self._fail()
        self.pos += 2

        spec = self._parse_optional(self._parse_pad)
        base = self._parse_optional(self._parse_base) or NumberBase.DECIMAL

        try:
            channel = Channel.from_designator(self._peek())
        except ValueError:
            raise self._fail() from None
        self.pos += 1

        if self._peek() != "}":
            raise self._fail()
        self.pos += 1

        return Expansion(channel=channel, base=base, pad=spec)

    def _parse_optional(self, rule: Callable[[], Any]) -> Any:
        saved = self.pos
        try:
            return rule()
        except _Backtrack:
            self.pos = saved
            return None

    def _parse_pad(self) -> PadSpec:
        fill = self._peek()
        if not fill or not self._peek(1) or self._peek(1) not in DIGITS:
            raise _Backtrack
        self.pos += 1

        digits_start = self.pos
        while (
            self.pos < self.length
            and self.pos - digits_start < MAX_PAD_DIGITS
            and self.text[self.pos] in DIGITS
        ):
            self.pos += 1

        width = int(self.text[digits_start : self.pos])
        if width > MAX_PAD_WIDTH:
            # No base or channel starts with a digit, so this can never recover
            raise self._fail()
        return PadSpec(fill, width)

    def _parse_base(self) -> NumberBase:
        base = BASES.get(self._peek())
        if base is None:
            raise _Backtrack
        self.pos += 1
        return base


def parse(text: str) -> Template:
    """Parse a template string.

    Args:
        text: Template source, e.g. ``"#%{02hr}%{02hg}%{02hb}"``

    Returns:
        Parsed Template

    Raises:
        ParseError: If the string is not a valid template
    """
    template = TemplateParser(text).parse()
    logger.debug(f"Parsed template {text!r} into {len(template.nodes)} nodes")
    return template


def scan(text: str) -> list[Span]:
    """Parse a template string, keeping source positions of each node."""
    return TemplateParser(text).scan()
