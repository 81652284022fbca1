"""Exceptions raised while resolving external resources."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class InlineError(RuntimeError):
    """Base class for every failure that aborts an inlining run."""


class ReadFailure(InlineError):
    """A local file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path


class FetchFailure(InlineError):
    """A remote resource could not be retrieved."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        detail = f"{status} {reason}" if status is not None else reason
        super().__init__(f"{detail} ({url})")
        self.url = url
        self.reason = reason
        self.status = status


class IntegrityMismatch(InlineError):
    """The digest of fetched bytes differs from the declared one."""

    def __init__(self, url: str, expected: str, actual: str) -> None:
        super().__init__(f"{expected} mismatch with {actual}")
        self.url = url
        self.expected = expected
        self.actual = actual
