"""Interactive template editor using prompt_toolkit."""

from colorfmt.editor.lexer import TemplateLexer
from colorfmt.editor.prompt import TemplateEditor, edit_template
from colorfmt.editor.validator import TemplateValidator

__all__ = ["TemplateEditor", "TemplateLexer", "TemplateValidator", "edit_template"]
