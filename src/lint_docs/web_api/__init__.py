"""
lint-docs Web API
=================
FastAPI host serving the "Ignoring Rules" documentation page.

Quick Start:
    uvicorn lint_docs.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
