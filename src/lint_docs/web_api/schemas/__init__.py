"""
Pydantic Schemas
================
Response models for the API.
"""
from .page import PageDataModel, StaticDataResponse

__all__ = ["PageDataModel", "StaticDataResponse"]
