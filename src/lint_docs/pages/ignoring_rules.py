"""The "Ignoring Rules" page component.

Rendering builds a small display tree (header + content container); the
content container receives the loader's HTML verbatim. Mounting runs the
syntax-highlighting pass once over the code blocks present at that moment.

The HTML is injected without escaping or sanitizing and must come from
build-time markdown only.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag
from jinja2 import Environment

from lint_docs.errors import PageNotRenderedError
from lint_docs.pages.data import StaticData
from lint_docs.pages.header import Header
from lint_docs.pages.highlight import Highlighter

logger = logging.getLogger(__name__)

_env = Environment(autoescape=True)

_LAYOUT_TMPL = _env.from_string(
    """<div class="mx-auto max-w-screen-lg px-6 sm:px-6 md:px-8">
{{ header|safe }}
<main class="prose my-8"></main>
</div>"""
)

_DOCUMENT_TMPL = _env.from_string(
    """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8"/>
  <meta name="viewport" content="width=device-width,initial-scale=1"/>
  <title>{{ title }}</title>
  <style>{{ stylesheet|safe }}</style>
</head>
<body>
{{ body|safe }}
</body>
</html>
"""
)

CODE_BLOCK_SELECTOR = "pre code"


class IgnoringRulesPage:
    """Header followed by a content container holding the page HTML."""

    def __init__(self, highlighter: Highlighter, header: Header | None = None) -> None:
        self.highlighter = highlighter
        self.header = header or Header()
        self._root: Tag | None = None
        self._content: Tag | None = None
        self._mounted = False

    @property
    def content(self) -> Tag | None:
        """The ``<main>`` content container, once rendered."""
        return self._content

    @property
    def mounted(self) -> bool:
        return self._mounted

    def render(self, props: StaticData) -> Tag:
        """Render *props* and return the root of the display tree.

        Re-rendering keeps the header and replaces every child of the
        content container.
        """
        if self._root is None:
            tree = BeautifulSoup(_LAYOUT_TMPL.render(header=self.header.render()), "html.parser")
            self._root = tree.div
            self._content = self._root.main

        self._content.clear()
        for node in list(BeautifulSoup(props.data.html, "html.parser").contents):
            self._content.append(node)
        return self._root

    def mount(self) -> int:
        """Run the one-time highlighting pass; return how many blocks it touched.

        Later calls do nothing and return 0. Highlighter errors propagate.
        """
        if self._content is None:
            raise PageNotRenderedError("mount() called before render()")
        if self._mounted:
            return 0
        self._mounted = True

        blocks = self._content.select(CODE_BLOCK_SELECTOR)
        for block in blocks:
            self.highlighter.highlight_block(block)
        logger.debug("highlighted %d code blocks", len(blocks))
        return len(blocks)

    def to_html(self) -> str:
        if self._root is None:
            raise PageNotRenderedError("to_html() called before render()")
        return str(self._root)


def render_document(page: IgnoringRulesPage, *, title: str, stylesheet: str = "") -> str:
    """Wrap a rendered page in a complete HTML5 document."""
    return _DOCUMENT_TMPL.render(title=title, stylesheet=stylesheet, body=page.to_html())
