"""Tests for the static page build."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from lint_docs.build import build_page
from lint_docs.pages.highlight import PygmentsHighlighter


@pytest.fixture
def source(tmp_path: Path) -> Path:
    src = tmp_path / "page.md"
    src.write_text("# Title\n\n```python\nx = {'a': 1}\n```\n", encoding="utf-8")
    return src


class TestBuildPage:
    """build_page loads, renders, mounts and writes one document."""

    def test_writes_document(self, tmp_path: Path, source: Path):
        out = tmp_path / "site" / "page.html"

        written = asyncio.run(build_page(source, out, PygmentsHighlighter(), title="Docs"))

        assert written == out
        html = out.read_text(encoding="utf-8")
        assert "<title>Docs</title>" in html
        assert "<h1>Title</h1>" in html

    def test_code_blocks_are_highlighted(self, tmp_path: Path, source: Path):
        out = tmp_path / "page.html"

        asyncio.run(build_page(source, out, PygmentsHighlighter()))

        html = out.read_text(encoding="utf-8")
        assert 'class="language-python hljs"' in html
        assert ".hljs" in html  # stylesheet

    def test_missing_source_raises_and_writes_nothing(self, tmp_path: Path):
        out = tmp_path / "page.html"

        with pytest.raises(FileNotFoundError):
            asyncio.run(build_page(tmp_path / "nope.md", out, PygmentsHighlighter()))

        assert not out.exists()

    def test_document_uses_highlighter_stylesheet(self, tmp_path: Path, source: Path):
        class PlainHighlighter:
            def highlight_block(self, element) -> None:
                element["class"] = ["plain"]

            def stylesheet(self) -> str:
                return ".plain{color:#333}"

        out = tmp_path / "page.html"

        asyncio.run(build_page(source, out, PlainHighlighter()))

        html = out.read_text(encoding="utf-8")
        assert ".plain{color:#333}" in html
        assert '<code class="plain">' in html
