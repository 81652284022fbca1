"""Command-line entry point for the HTML inliner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_TAGS, InlineConfig
from .errors import InlineError
from .pipeline import run_inline

logger = logging.getLogger("html_inline.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Inline external scripts, stylesheets, icons and images into a single HTML file."
        ),
    )
    parser.add_argument("src", help="Source HTML file, relative to the current directory")
    parser.add_argument(
        "--tags",
        nargs="+",
        default=list(DEFAULT_TAGS),
        help="Tag names to resolve (default: script link img)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print the resulting HTML",
    )
    parser.add_argument(
        "--minify",
        action="store_true",
        help="Minify the resulting HTML, including embedded CSS and JS (ignored with --pretty)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the result to this file instead of STDOUT",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Timeout in seconds for each remote request (default: none)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    config = InlineConfig(
        src=args.src,
        tags=tuple(args.tags),
        pretty=args.pretty,
        minify=args.minify,
        timeout=args.timeout,
    )

    try:
        html = asyncio.run(run_inline(config))
    except InlineError as exc:
        logger.error("Failed to inline %s: %s", args.src, exc)
        raise SystemExit(1) from exc

    if args.output:
        args.output.write_text(html, encoding="utf-8")
        logger.info("Saved HTML to %s", args.output)
        return
    sys.stdout.write(html if html.endswith("\n") else html + "\n")
    sys.stdout.flush()


if __name__ == "__main__":
    main()
