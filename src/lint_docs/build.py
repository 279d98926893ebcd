"""Static build of the "Ignoring Rules" page."""

from __future__ import annotations

import logging
from pathlib import Path

from lint_docs.core.config import DEFAULT_TITLE
from lint_docs.pages.highlight import Highlighter
from lint_docs.pages.ignoring_rules import IgnoringRulesPage, render_document
from lint_docs.pages.loader import get_static_data

logger = logging.getLogger(__name__)


async def build_page(
    source: Path,
    out_path: Path,
    highlighter: Highlighter,
    *,
    title: str = DEFAULT_TITLE,
) -> Path:
    """Load, render and mount the page, then write the document to *out_path*.

    A missing *source* raises ``FileNotFoundError`` before anything is written.
    """
    props = await get_static_data(source)

    page = IgnoringRulesPage(highlighter)
    page.render(props)
    page.mount()

    document = render_document(page, title=title, stylesheet=highlighter.stylesheet())

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(document, encoding="utf-8")
    logger.info("wrote %s", out_path.as_posix())
    return out_path
