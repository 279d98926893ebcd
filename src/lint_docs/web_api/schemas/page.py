"""
Page Schemas
============
Response models for page data endpoints.
"""
from pydantic import BaseModel, ConfigDict, Field

from lint_docs.pages.data import StaticData


class PageDataModel(BaseModel):
    """Converted page content"""

    html: str = Field(..., description="Page HTML converted from markdown")


class StaticDataResponse(BaseModel):
    """Data envelope produced by the page's static data loader"""

    data: PageDataModel

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "data": {"html": "<h1>Ignoring rules</h1>"},
            }
        }
    )

    @classmethod
    def from_static_data(cls, props: StaticData) -> "StaticDataResponse":
        return cls(data=PageDataModel(html=props.data.html))
