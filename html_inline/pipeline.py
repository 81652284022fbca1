"""High-level orchestration: load, parse, resolve, serialize and format."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Iterable, Optional

import requests

from .config import DEFAULT_TAGS, InlineConfig
from .document import format_output, parse_document, serialize_document
from .loader import ResourceLoader, decode_text, read_file
from .models import InlineRun
from .resolver import resolve_tags

logger = logging.getLogger("html_inline")


async def load_source(src: str) -> str:
    """Read the source document, resolved against the working directory."""
    path = Path.cwd() / src.strip()
    return decode_text(await asyncio.to_thread(read_file, path))


def build_run(
    html: str,
    config: InlineConfig,
    session: Optional[requests.Session] = None,
) -> InlineRun:
    """Parse the document and bind a loader to the source file's directory."""
    base_dir = Path(config.src.strip()).parent
    loader = ResourceLoader(base_dir, session=session, timeout=config.timeout)
    return InlineRun(document=parse_document(html), loader=loader)


async def run_inline(
    config: InlineConfig,
    session: Optional[requests.Session] = None,
) -> str:
    """Inline the external resources of ``config.src`` and return the HTML."""
    start = time.perf_counter()
    html = await load_source(config.src)
    run = build_run(html, config, session=session)
    await resolve_tags(run, config.normalized_tags())
    output = format_output(
        serialize_document(run.document),
        pretty=config.pretty,
        minify=config.minify,
    )
    logger.info("Inlined %s in %.2fs", config.src, time.perf_counter() - start)
    return output


def inline_external(
    src: str,
    tags: Optional[Iterable[str]] = None,
    pretty: bool = False,
    minify: bool = False,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """Synchronous wrapper around :func:`run_inline`."""
    config = InlineConfig(
        src=src,
        tags=tuple(tags) if tags is not None else DEFAULT_TAGS,
        pretty=pretty,
        minify=minify,
        timeout=timeout,
    )
    return asyncio.run(run_inline(config, session=session))
