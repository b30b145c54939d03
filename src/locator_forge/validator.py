"""Validation of generated locators against the source fragment.

Every candidate is evaluated with lxml's native XPath engine against the same
sanitized markup it was derived from. Anything that fails to compile, fails to
evaluate, or resolves to no element is rejected here and never reaches the
caller.
"""

import logging
from typing import Literal

import lxml.html
from bs4 import BeautifulSoup
from lxml import etree
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)

ValidationMode = Literal["any", "unique"]


def parse_tree(markup: str) -> etree._Element:
    """Parse sanitized markup into a fresh lxml document."""
    return lxml.html.document_fromstring(markup)


def count_xpath_matches(locator: str, tree: etree._Element) -> int:
    """Count element nodes an XPath expression resolves to.

    Raises lxml's XPath errors for malformed expressions. Non node-set results
    (strings, numbers, booleans) count as zero matches.
    """
    result = tree.xpath(locator)
    if not isinstance(result, list):
        return 0
    return sum(1 for node in result if isinstance(node, etree._Element))


def _accept(count: int, mode: ValidationMode) -> bool:
    if mode == "unique":
        return count == 1
    return count > 0


def validate_xpath(locator: str, markup: str, mode: ValidationMode = "any") -> bool:
    """Check that an XPath resolves against the markup; never raises."""
    return XPathValidator(markup, mode=mode).is_valid(locator)


def validate_css(selector: str, markup: str, mode: ValidationMode = "any") -> bool:
    """Check that a CSS selector resolves against the markup; never raises."""
    try:
        matches = BeautifulSoup(markup, "lxml").select(selector)
    except (SelectorSyntaxError, NotImplementedError, ValueError) as exc:
        logger.debug("Rejected CSS selector %r: %s", selector, exc)
        return False
    return _accept(len(matches), mode)


class XPathValidator:
    """Validate XPath candidates against one sanitized fragment.

    By default the markup is reparsed for every candidate. With
    ``reuse_tree`` the tree is parsed once and only ever read.
    """

    def __init__(self, markup: str, mode: ValidationMode = "any", reuse_tree: bool = False):
        self.markup = markup
        self.mode = mode
        self.reuse_tree = reuse_tree
        self._tree: etree._Element | None = None
        self.rejected: list[str] = []

    def _tree_for_candidate(self) -> etree._Element:
        if not self.reuse_tree:
            return parse_tree(self.markup)
        if self._tree is None:
            self._tree = parse_tree(self.markup)
        return self._tree

    def is_valid(self, locator: str) -> bool:
        try:
            count = count_xpath_matches(locator, self._tree_for_candidate())
        except (etree.XPathError, ValueError) as exc:
            logger.debug("Rejected XPath %r: %s", locator, exc)
            self.rejected.append(locator)
            return False

        if not _accept(count, self.mode):
            logger.debug("Rejected XPath %r: %d matches", locator, count)
            self.rejected.append(locator)
            return False
        return True
