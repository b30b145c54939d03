"""HTML parser that turns a fragment into a navigable element snapshot."""

import logging

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from ..config import SanitizerConfig
from ..errors import EmptyInput, NoElementFound
from ..models import ElementNode, TargetElement
from ..validator import ValidationMode, validate_css, validate_xpath
from .sanitizer import parse_fragment, sanitize

logger = logging.getLogger(__name__)


class HTMLParser:
    """Parse and sanitize an HTML fragment and locate the element under analysis."""

    def __init__(
        self,
        fragment: str | None,
        sanitizer: SanitizerConfig | None = None,
        target_marker: str | None = None,
    ):
        if fragment is None or not fragment.strip():
            raise EmptyInput()

        rules = sanitizer or SanitizerConfig()
        self.soup: BeautifulSoup = sanitize(
            parse_fragment(fragment),
            forbidden_tags=rules.forbidden_tags,
            strip_comments=rules.strip_comments,
        )
        self._target = self._find_target(target_marker)
        if self._target is None:
            raise NoElementFound()

        # Serialized after the marker is dropped so validation sees the same tree
        self.markup = str(self.soup)
        self._element: TargetElement | None = None

    @property
    def root(self) -> Tag | None:
        """The implicit body element that wraps the fragment."""
        return self.soup.body

    def target(self) -> TargetElement:
        """Build the immutable snapshot of the target element."""
        if self._element is None:
            self._element = self._tag_to_target(self._target)
            logger.debug(
                "Target <%s> with %d attributes, %d ancestors",
                self._element.tag,
                len(self._element.attributes),
                len(list(self._element.ancestors())),
            )
        return self._element

    def matches(self, locator: str, mode: ValidationMode = "any") -> bool:
        """Re-run an XPath expression against the sanitized fragment."""
        return validate_xpath(locator, self.markup, mode)

    def matches_css(self, selector: str, mode: ValidationMode = "any") -> bool:
        """Re-run a CSS selector against the sanitized fragment."""
        return validate_css(selector, self.markup, mode)

    def select(self, css_selector: str) -> list[Tag]:
        """Find elements matching a CSS selector."""
        return [tag for tag in self.soup.select(css_selector) if isinstance(tag, Tag)]

    def _find_target(self, marker: str | None) -> Tag | None:
        body = self.root
        if body is None:
            return None

        if marker:
            marked = [tag for tag in body.find_all(attrs={marker: True}) if isinstance(tag, Tag)]
            for tag in marked:
                del tag[marker]
            if marked:
                return marked[0]

        first = body.find(True, recursive=False)
        return first if isinstance(first, Tag) else None

    def _tag_to_target(self, tag: Tag) -> TargetElement:
        parent = self._ancestor_chain(tag)

        same_tag = [tag]
        for sibling in tag.find_previous_siblings(tag.name):
            same_tag.insert(0, sibling)
        same_tag.extend(tag.find_next_siblings(tag.name))

        siblings = tuple(self._tag_to_node(sibling, parent) for sibling in same_tag)
        previous = tag.find_previous_sibling(True)
        following = tag.find_next_sibling(True)

        return TargetElement(
            tag=tag.name,
            attributes=self._attributes(tag),
            text=tag.get_text().strip(),
            parent=parent,
            direct_texts=self._direct_texts(tag),
            siblings=siblings,
            position=same_tag.index(tag) + 1,
            previous_tag=previous.name if isinstance(previous, Tag) else None,
            next_tag=following.name if isinstance(following, Tag) else None,
        )

    def _ancestor_chain(self, tag: Tag) -> ElementNode | None:
        """Snapshot the ancestors up to the fragment top level, outermost first."""
        chain: list[Tag] = []
        current = tag.parent
        while isinstance(current, Tag) and current is not self.root and current.name != "html":
            chain.append(current)
            current = current.parent

        node: ElementNode | None = None
        for ancestor in reversed(chain):
            node = self._tag_to_node(ancestor, node)
        return node

    def _tag_to_node(self, tag: Tag, parent: ElementNode | None) -> ElementNode:
        return ElementNode(
            tag=tag.name,
            attributes=self._attributes(tag),
            text=tag.get_text().strip(),
            parent=parent,
            direct_texts=self._direct_texts(tag),
        )

    @staticmethod
    def _direct_texts(tag: Tag) -> tuple[str, ...]:
        return tuple(
            str(child)
            for child in tag.children
            if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
        )

    @staticmethod
    def _attributes(tag: Tag) -> dict[str, str]:
        return {
            name: " ".join(value) if isinstance(value, list) else str(value)
            for name, value in tag.attrs.items()
        }
