"""The "Ignoring Rules" page: loader, header, highlighter and renderer."""

from lint_docs.pages.data import PageData, StaticData
from lint_docs.pages.header import Header
from lint_docs.pages.highlight import Highlighter, PygmentsHighlighter, resolve_highlighter
from lint_docs.pages.ignoring_rules import IgnoringRulesPage, render_document
from lint_docs.pages.loader import DEFAULT_SOURCE, get_static_data
from lint_docs.pages.converter import ParsedMarkdown, md_parse

__all__ = [
    "DEFAULT_SOURCE",
    "Header",
    "Highlighter",
    "IgnoringRulesPage",
    "PageData",
    "ParsedMarkdown",
    "PygmentsHighlighter",
    "StaticData",
    "get_static_data",
    "md_parse",
    "render_document",
    "resolve_highlighter",
]
