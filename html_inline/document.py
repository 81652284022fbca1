"""HTML parsing, serialization and output formatting."""

from __future__ import annotations

import minify_html
from bs4 import BeautifulSoup

from .config import MINIFY_OPTIONS


def parse_document(html: str) -> BeautifulSoup:
    """Parse HTML keeping every attribute value as the literal source string."""
    return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)


def serialize_document(document: BeautifulSoup) -> str:
    return document.decode()


def prettify_html(html: str) -> str:
    return parse_document(html).prettify()


def minify_output(html: str) -> str:
    """Collapse whitespace and minify embedded CSS and JS."""
    return minify_html.minify(html, **MINIFY_OPTIONS)


def format_output(html: str, pretty: bool = False, minify: bool = False) -> str:
    """Apply the requested formatter; pretty printing wins over minification."""
    if pretty:
        return prettify_html(html)
    if minify:
        return minify_output(html)
    return html
