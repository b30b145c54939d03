"""Text-based locators."""

from ..config import GenerationConfig
from ..models import Derivation, TargetElement
from ..xpath import contains, contains_ignore_case, normalized_text_equals, predicate_path, text_equals
from .base import sibling_rank


def derive(target: TargetElement, config: GenerationConfig) -> list[Derivation]:
    """Match the element by its text content; nothing when the element has no text."""
    text = target.text
    if not text:
        return []

    tag = target.tag
    exact = text_equals(text)
    found = [
        Derivation(predicate_path(tag, exact), "text:exact", 0.9),
        Derivation(predicate_path(tag, contains("text()", text)), "text:contains", 0.88),
        Derivation(predicate_path(tag, normalized_text_equals(text)), "text:normalized", 0.9),
        Derivation(predicate_path(tag, contains_ignore_case(".", text)), "text:ignore-case", 0.87),
    ]

    # Count siblings the way text()= does: any direct text node equal to the value
    rank = sibling_rank(target, lambda node: text in node.direct_texts)
    if rank:
        found.append(Derivation(predicate_path(tag, exact, position=rank), "text:exact-position", 0.85))
    return found
