"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import health, pages

__all__ = ["health", "pages"]
