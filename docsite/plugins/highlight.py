"""Syntax highlighting for fenced code blocks, backed by Pygments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from markupsafe import Markup
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

if TYPE_CHECKING:
    from ..engine.site import SiteEngine

DEFAULT_CSS_CLASS = "highlight"


def make_highlight_filter(css_class: str = DEFAULT_CSS_CLASS):
    """Build a template filter: ``{{ code | highlight("python") }}``.

    Unknown languages fall back to plain text.
    """
    formatter = HtmlFormatter(cssclass=css_class)

    def highlight(code: str, language: str = "text") -> str:
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        return Markup(pygments_highlight(code, lexer, formatter))

    return highlight


def syntax_highlight(engine: SiteEngine, css_class: str = DEFAULT_CSS_CLASS) -> None:
    """Enable highlighting of fenced code blocks in markdown and templates."""
    engine.add_markdown_extension("fenced_code")
    engine.add_markdown_extension(
        "codehilite", {"css_class": css_class, "guess_lang": False}
    )
    engine.add_filter("highlight", make_highlight_filter(css_class))
