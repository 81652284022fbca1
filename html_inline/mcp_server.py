"""MCP server exposing the HTML inliner as a tool."""

from __future__ import annotations

import logging
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from .config import DEFAULT_TAGS, InlineConfig
from .pipeline import run_inline

logger = logging.getLogger("html_inline.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="html-inline")


@mcp.tool()
async def inline(
    src: str,
    tags: Optional[List[str]] = None,
    pretty: bool = False,
    minify: bool = False,
) -> str:
    """Inline the scripts, stylesheets, icons and images of an HTML file."""

    config = InlineConfig(
        src=src,
        tags=tuple(tags) if tags is not None else DEFAULT_TAGS,
        pretty=pretty,
        minify=minify,
    )
    return await run_inline(config)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
