"""Markup sanitizer that strips executable content before analysis."""

import logging
import re
from typing import Iterable

from bs4 import BeautifulSoup, Comment, Tag

from ..config import FORBIDDEN_TAGS

logger = logging.getLogger(__name__)

URI_ATTRIBUTES = frozenset(
    {"href", "src", "action", "formaction", "xlink:href", "data", "poster", "background"}
)

# Browsers ignore whitespace and control characters inside a scheme.
_SCHEME_NOISE = re.compile(r"[\x00-\x20]+")
_UNSAFE_SCHEMES = ("javascript:", "vbscript:", "data:text/html")


def parse_fragment(fragment: str) -> BeautifulSoup:
    """Parse a fragment inside an explicit document so no implied elements are added."""
    return BeautifulSoup(
        f"<html><body>{fragment}</body></html>",
        "lxml",
        multi_valued_attributes=None,
    )


def is_unsafe_uri(value: str) -> bool:
    """Check whether a URI attribute value uses an executable scheme."""
    normalized = _SCHEME_NOISE.sub("", value).lower()
    return normalized.startswith(_UNSAFE_SCHEMES)


def sanitize(
    soup: BeautifulSoup,
    forbidden_tags: Iterable[str] = FORBIDDEN_TAGS,
    strip_comments: bool = True,
) -> BeautifulSoup:
    """Remove scripts, event handlers and executable URIs from a parsed tree in place."""
    removed = 0
    names = [name.lower() for name in forbidden_tags]
    if names:
        for tag in soup.find_all(names):
            # Nested forbidden tags are already gone with their ancestor
            if tag.decomposed:
                continue
            tag.decompose()
            removed += 1

    if strip_comments:
        for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
            comment.extract()

    for tag in soup.find_all(True):
        if not isinstance(tag, Tag):
            continue
        for name in list(tag.attrs):
            value = tag.attrs[name]
            if name.lower().startswith("on"):
                del tag.attrs[name]
                removed += 1
            elif name.lower() in URI_ATTRIBUTES and isinstance(value, str) and is_unsafe_uri(value):
                del tag.attrs[name]
                removed += 1

    if removed:
        logger.debug("Sanitizer removed %d unsafe nodes or attributes", removed)
    return soup


def sanitize_markup(fragment: str, **options) -> str:
    """Sanitize a raw fragment and return the cleaned body markup."""
    soup = sanitize(parse_fragment(fragment), **options)
    body = soup.body
    if body is None:
        return ""
    return body.decode_contents()
