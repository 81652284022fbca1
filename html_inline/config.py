"""Configuration objects and constants for the inliner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_TAGS: Tuple[str, ...] = ("script", "link", "img")
REMOTE_PREFIXES: Tuple[str, ...] = ("http://", "https://")
MINIFY_OPTIONS = {"minify_css": True, "minify_js": True}


@dataclass
class InlineConfig:
    """Top-level settings for a single inlining run."""

    src: str
    tags: Tuple[str, ...] = DEFAULT_TAGS
    pretty: bool = False
    minify: bool = False
    timeout: Optional[float] = None

    def normalized_tags(self) -> Tuple[str, ...]:
        """Return tag names stripped, lower-cased and without duplicates."""
        seen = []
        for tag in self.tags:
            name = tag.strip().lower()
            if name and name not in seen:
                seen.append(name)
        return tuple(seen)
