"""Turn classified references into inlined content."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Iterable

from bs4.element import Script, Stylesheet

from .classifier import classify
from .encoder import to_data_uri
from .models import InlineRun, ResourceReference, Strategy
from .utils import file_extension

logger = logging.getLogger("html_inline")

Handler = Callable[[InlineRun, ResourceReference], Awaitable[None]]


async def _load_text(run: InlineRun, ref: ResourceReference) -> str:
    if ref.remote:
        return await run.loader.fetch_text(ref.locator, ref.integrity)
    return await run.loader.read_text(ref.locator)


async def inline_markup(run: InlineRun, ref: ResourceReference) -> None:
    """Move the referenced text into the element and drop the reference."""
    text = await _load_text(run, ref)
    ref.element.string = Script(text)
    del ref.element[ref.attribute]


async def inline_stylesheet(run: InlineRun, ref: ResourceReference) -> None:
    """Replace a stylesheet link with a style element holding its text."""
    text = await _load_text(run, ref)
    style = run.document.new_tag("style")
    style.string = Stylesheet(text)
    ref.element.replace_with(style)


async def inline_data_uri(run: InlineRun, ref: ResourceReference) -> None:
    data = await run.loader.read_bytes(ref.locator)
    ref.element[ref.attribute] = to_data_uri(file_extension(ref.locator), data)


async def skip(run: InlineRun, ref: ResourceReference) -> None:
    return None


HANDLERS: Dict[Strategy, Handler] = {
    Strategy.MARKUP: inline_markup,
    Strategy.STYLESHEET: inline_stylesheet,
    Strategy.DATA_URI: inline_data_uri,
    Strategy.SKIP: skip,
}


async def resolve_element(run: InlineRun, tag_name: str, element) -> None:
    ref = classify(tag_name, element)
    await HANDLERS[ref.strategy](run, ref)
    if ref.strategy is not Strategy.SKIP:
        logger.debug("Inlined <%s> %s (%s)", tag_name, ref.locator, ref.strategy.value)


async def resolve_tag(run: InlineRun, tag_name: str) -> None:
    """Resolve every element named ``tag_name`` concurrently."""
    elements = run.document.find_all(tag_name)
    await asyncio.gather(
        *(resolve_element(run, tag_name, element) for element in elements)
    )


async def resolve_tags(run: InlineRun, tag_names: Iterable[str]) -> None:
    """Resolve all tag groups concurrently; the first failure aborts the run."""
    await asyncio.gather(*(resolve_tag(run, tag_name) for tag_name in tag_names))
