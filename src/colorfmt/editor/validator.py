"""prompt_toolkit validator for template input."""

from __future__ import annotations

from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from colorfmt.core.formatter import parse_template
from colorfmt.errors import ParseError


class TemplateValidator(Validator):
    """Reject templates that do not parse, pointing at the failing element."""

    def validate(self, document: Document) -> None:
        try:
            parse_template(document.text)
        except ParseError as e:
            raise ValidationError(cursor_position=e.position, message=str(e)) from e
