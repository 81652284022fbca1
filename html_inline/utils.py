"""Utility helpers for locator inspection."""

from __future__ import annotations

import posixpath
from typing import Optional

from .config import REMOTE_PREFIXES


def is_remote(locator: str) -> bool:
    """Return True when the locator is an absolute http(s) URL."""
    return locator.startswith(REMOTE_PREFIXES)


def file_extension(locator: str) -> str:
    """Extension of the last path component without the dot, or an empty string."""
    return posixpath.splitext(locator)[1][1:]


def attribute(element, name: str) -> Optional[str]:
    return element.get(name)
