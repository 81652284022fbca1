"""Decide how each element's external reference should be inlined."""

from __future__ import annotations

from typing import Callable, Dict

from bs4 import Tag

from .models import ResourceReference, Strategy
from .utils import attribute, is_remote

Rule = Callable[[Tag], ResourceReference]


def _skip(element: Tag) -> ResourceReference:
    return ResourceReference(element, Strategy.SKIP)


def _data_uri(element: Tag, name: str) -> ResourceReference:
    # Plain four character prefix check: "http-assets/logo.png" is skipped too.
    locator = attribute(element, name)
    if not locator or locator.startswith("http") or locator.startswith("data:"):
        return _skip(element)
    return ResourceReference(element, Strategy.DATA_URI, name, locator)


def classify_script(element: Tag) -> ResourceReference:
    locator = attribute(element, "src")
    if not locator:
        return _skip(element)
    return ResourceReference(
        element,
        Strategy.MARKUP,
        "src",
        locator,
        remote=is_remote(locator),
        integrity=attribute(element, "integrity"),
    )


def classify_image(element: Tag) -> ResourceReference:
    return _data_uri(element, "src")


def classify_stylesheet(element: Tag) -> ResourceReference:
    locator = attribute(element, "href")
    if not locator:
        return _skip(element)
    return ResourceReference(
        element,
        Strategy.STYLESHEET,
        "href",
        locator,
        remote=is_remote(locator),
    )


def classify_icon(element: Tag) -> ResourceReference:
    locator = attribute(element, "href")
    if not locator or is_remote(locator):
        return _skip(element)
    return _data_uri(element, "href")


LINK_RULES: Dict[str, Rule] = {
    "stylesheet": classify_stylesheet,
    "icon": classify_icon,
}


def classify_link(element: Tag) -> ResourceReference:
    rule = LINK_RULES.get(attribute(element, "rel") or "", _skip)
    return rule(element)


TAG_RULES: Dict[str, Rule] = {
    "script": classify_script,
    "link": classify_link,
    "img": classify_image,
}


def classify(tag_name: str, element: Tag) -> ResourceReference:
    """Classify ``element`` found under ``tag_name``; unknown tags are skipped."""
    rule = TAG_RULES.get(tag_name, _skip)
    return rule(element)
