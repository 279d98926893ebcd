"""
Health Check Router
===================
Endpoints for health checks and readiness probes.
"""
from pathlib import Path

from fastapi import APIRouter

from lint_docs import __version__
from lint_docs.web_api.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Ready once the page source is readable.
    """
    source = Path(settings.PAGE_SOURCE)
    return {"status": "ready" if source.is_file() else "not_ready", "source": source.as_posix()}
