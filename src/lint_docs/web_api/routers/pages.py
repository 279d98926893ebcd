"""
Pages Router
============
Serves the "Ignoring Rules" page and its static data.
"""
import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from lint_docs.pages.ignoring_rules import IgnoringRulesPage, render_document
from lint_docs.pages.loader import get_static_data
from lint_docs.pages.data import StaticData
from lint_docs.web_api.config import settings
from lint_docs.web_api.schemas.page import StaticDataResponse

logger = logging.getLogger(__name__)

router = APIRouter()


async def _load() -> StaticData:
    source = Path(settings.PAGE_SOURCE)
    try:
        return await get_static_data(source)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"Page source not found: {source.as_posix()}")


@router.get("/ignoring-rules", response_class=HTMLResponse)
async def ignoring_rules_page(request: Request):
    """
    Render the "Ignoring Rules" page with highlighted code blocks.

    A highlighter failure leaves the code blocks unhighlighted; the page is
    still served.
    """
    props = await _load()
    highlighter = request.app.state.highlighter

    page = IgnoringRulesPage(highlighter)
    page.render(props)
    try:
        page.mount()
    except Exception:
        logger.warning("code highlighting failed; serving unhighlighted page", exc_info=True)

    document = render_document(page, title=settings.PAGE_TITLE, stylesheet=highlighter.stylesheet())
    return HTMLResponse(document)


@router.get("/ignoring-rules/data", response_model=StaticDataResponse)
async def ignoring_rules_data():
    """
    Return the page's static data envelope.
    """
    return StaticDataResponse.from_static_data(await _load())
