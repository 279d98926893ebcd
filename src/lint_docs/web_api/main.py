"""
FastAPI Application
===================
Main entry point for the documentation host.

Run with:
    uvicorn lint_docs.web_api.main:app --reload
"""
import logging

from fastapi import FastAPI

from lint_docs import __version__
from lint_docs.pages.highlight import resolve_highlighter
from lint_docs.web_api.config import settings
from lint_docs.web_api.routers import health, pages

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

# Create application
app = FastAPI(
    title="lint-docs",
    description="Documentation pages for the lint rules",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# Resolved once per process; routes read it from app.state.
app.state.highlighter = resolve_highlighter(settings.HIGHLIGHTER)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(pages.router, tags=["Pages"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "lint-docs",
        "version": __version__,
        "pages": ["/ignoring-rules"],
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m lint_docs.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
