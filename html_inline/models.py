"""Data models used throughout the inlining pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bs4 import BeautifulSoup, Tag

from .loader import ResourceLoader


class Strategy(str, Enum):
    """How a classified element gets its external content inlined."""

    MARKUP = "markup"
    STYLESHEET = "stylesheet"
    DATA_URI = "data_uri"
    SKIP = "skip"


@dataclass(frozen=True)
class ResourceReference:
    """Transient view of one element and the way it should be resolved."""

    element: Tag
    strategy: Strategy
    attribute: Optional[str] = None
    locator: Optional[str] = None
    remote: bool = False
    integrity: Optional[str] = None


@dataclass
class InlineRun:
    """State owned by a single pipeline run."""

    document: BeautifulSoup
    loader: ResourceLoader
