"""Core configuration for building the documentation page."""

from lint_docs.core.config import PageConfig

__all__ = ["PageConfig"]
