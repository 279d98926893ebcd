"""Page build configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SOURCE = Path("./public/ignoring-rules.md")
DEFAULT_OUT = Path("site/ignoring-rules.html")
DEFAULT_TITLE = "Ignoring rules"


@dataclass(frozen=True)
class PageConfig:
    """Immutable build configuration.

    ``source`` is resolved against the process working directory, the same
    way the web host resolves ``PAGE_SOURCE``.
    """

    source: Path = DEFAULT_SOURCE
    out_path: Path = DEFAULT_OUT
    title: str = DEFAULT_TITLE
    highlighter: str = "pygments"
