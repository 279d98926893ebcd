"""Markdown → HTML conversion backed by Python-Markdown."""

from __future__ import annotations

from dataclasses import dataclass

import markdown

# Highlighting happens after render, so no codehilite here: fenced blocks keep
# their ``language-*`` class for the highlighter to read.
_EXTENSIONS = ["fenced_code", "tables"]


@dataclass(frozen=True, slots=True)
class ParsedMarkdown:
    """Converter result. The HTML lives under ``parsed``."""

    parsed: str


def md_parse(raw: str) -> ParsedMarkdown:
    """Convert *raw* markdown text to HTML."""
    md = markdown.Markdown(extensions=_EXTENSIONS, output_format="html")
    return ParsedMarkdown(parsed=md.convert(raw))
