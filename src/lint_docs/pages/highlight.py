"""Syntax highlighting for code blocks in the display tree.

The highlighter is resolved once at process start (see
:func:`resolve_highlighter`) and handed to the page explicitly; nothing looks
it up from global state at render time.
"""

from __future__ import annotations

from typing import Callable, Protocol

from bs4 import BeautifulSoup, Tag
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from lint_docs.errors import HighlighterUnavailableError

HIGHLIGHT_CLASS = "hljs"
_LANGUAGE_PREFIX = "language-"


class Highlighter(Protocol):
    """Highlights ``<code>`` elements in place and supplies the CSS for them."""

    def highlight_block(self, element: Tag) -> None: ...

    def stylesheet(self) -> str: ...


def _block_language(element: Tag) -> str | None:
    for cls in element.get("class") or []:
        if cls.startswith(_LANGUAGE_PREFIX):
            return cls[len(_LANGUAGE_PREFIX):]
    return None


class PygmentsHighlighter:
    """Highlights code blocks with Pygments token spans.

    The lexer comes from the block's ``language-<lang>`` class. Blocks
    without one are guessed from their content; unknown languages are left
    as plain text.
    """

    name = "pygments"

    def __init__(self, style: str = "default") -> None:
        self.style = style
        self._formatter = HtmlFormatter(nowrap=True, style=style)

    def _lexer_for(self, element: Tag, code: str) -> Lexer:
        lang = _block_language(element)
        try:
            if lang:
                return get_lexer_by_name(lang)
            return guess_lexer(code)
        except ClassNotFound:
            return TextLexer()

    def highlight_block(self, element: Tag) -> None:
        code = element.get_text()
        markup = highlight(code, self._lexer_for(element, code), self._formatter)
        element.clear()
        for node in list(BeautifulSoup(markup, "html.parser").contents):
            element.append(node)
        classes = list(element.get("class") or [])
        if HIGHLIGHT_CLASS not in classes:
            classes.append(HIGHLIGHT_CLASS)
        element["class"] = classes

    def stylesheet(self) -> str:
        """CSS rules for the token classes emitted by :meth:`highlight_block`."""
        return HtmlFormatter(style=self.style).get_style_defs(f".{HIGHLIGHT_CLASS}")


_REGISTRY: dict[str, Callable[[], Highlighter]] = {
    PygmentsHighlighter.name: PygmentsHighlighter,
}


def resolve_highlighter(name: str = PygmentsHighlighter.name) -> Highlighter:
    """Return a new highlighter registered under *name*.

    Raises :class:`HighlighterUnavailableError` for unknown names.
    """
    try:
        factory = _REGISTRY[name]
    except KeyError:
        raise HighlighterUnavailableError(name) from None
    return factory()
