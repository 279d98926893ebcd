"""Data records passed from the loader to the renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PageData:
    """Converted page content. Produced once per build, never mutated."""

    html: str

    def to_dict(self) -> dict:
        return {"html": self.html}


@dataclass(frozen=True, slots=True)
class StaticData:
    """Envelope the page host expects from a static data loader."""

    data: PageData

    def to_dict(self) -> dict:
        return {"data": self.data.to_dict()}
