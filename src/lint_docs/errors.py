"""Exception hierarchy shared by the page and the rule engine."""

from __future__ import annotations


class LintDocsError(Exception):
    """Base class for errors raised by lint_docs itself."""


class HighlighterUnavailableError(LintDocsError):
    """No highlighter is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Highlighter not available: {name!r}")
        self.name = name


class PageNotRenderedError(LintDocsError):
    """The page was mounted before anything was rendered into it."""
