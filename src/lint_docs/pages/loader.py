"""Static data loader for the "Ignoring Rules" page."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from lint_docs.core.config import DEFAULT_SOURCE
from lint_docs.pages.data import PageData, StaticData
from lint_docs.pages.converter import md_parse

logger = logging.getLogger(__name__)


async def get_static_data(path: Path = DEFAULT_SOURCE) -> StaticData:
    """Read the page's markdown source and convert it to HTML.

    Read and conversion errors are not caught: a missing source raises
    ``FileNotFoundError`` so the caller can abort the page build.
    """
    raw = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    html = md_parse(raw).parsed
    logger.debug("loaded %s (%d bytes of html)", path, len(html))
    return StaticData(data=PageData(html=html))
