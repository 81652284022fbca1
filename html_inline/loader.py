"""Local file reads and remote fetches with integrity verification."""

from __future__ import annotations

import asyncio
import base64
import hashlib
import logging
from pathlib import Path
from typing import Optional

import requests

from .errors import FetchFailure, IntegrityMismatch, ReadFailure

logger = logging.getLogger("html_inline")

INTEGRITY_PREFIX = "sha384-"


def compute_integrity(data: bytes) -> str:
    """Return the ``sha384-<base64>`` digest of ``data``."""
    digest = hashlib.sha384(data).digest()
    return INTEGRITY_PREFIX + base64.b64encode(digest).decode("ascii")


def decode_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def read_file(path: Path) -> bytes:
    """Read a file, reporting any OS level problem as a ReadFailure."""
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ReadFailure(path, exc.strerror or str(exc)) from exc


class ResourceLoader:
    """Reads resources relative to one source document.

    Local locators are joined onto the directory that contains the source
    HTML file. Remote locators are fetched over HTTP and, when a digest is
    supplied, checked against it before the body is returned.
    """

    def __init__(
        self,
        base_dir: Path,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_dir = base_dir
        self.session = session or requests.Session()
        self.timeout = timeout

    def resolve_local(self, locator: str) -> Path:
        """Map a document-relative locator to an absolute filesystem path."""
        joined = f"{self.base_dir}/{locator}".strip()
        return Path.cwd() / Path(joined)

    async def read_bytes(self, locator: str) -> bytes:
        path = self.resolve_local(locator)
        logger.debug("Reading %s", path)
        return await asyncio.to_thread(read_file, path)

    async def read_text(self, locator: str) -> str:
        return decode_text(await self.read_bytes(locator))

    def _fetch(self, url: str, integrity: Optional[str]) -> bytes:
        logger.debug("Fetching %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchFailure(url, str(exc)) from exc
        if not resp.ok:
            raise FetchFailure(url, resp.reason or "", status=resp.status_code)

        data = resp.content
        if integrity:
            actual = compute_integrity(data)
            if integrity != actual:
                raise IntegrityMismatch(url, integrity, actual)
            logger.info("verified %s : %s", actual, url)
        return data

    async def fetch_bytes(self, url: str, integrity: Optional[str] = None) -> bytes:
        return await asyncio.to_thread(self._fetch, url, integrity)

    async def fetch_text(self, url: str, integrity: Optional[str] = None) -> str:
        return decode_text(await self.fetch_bytes(url, integrity))
