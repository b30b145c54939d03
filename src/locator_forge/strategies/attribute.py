"""Attribute-based locators: id, classes and semantic attributes."""

from ..config import GenerationConfig
from ..models import Derivation, TargetElement
from ..xpath import attr_equals, has_class, is_xpath_name, join, predicate_path
from .base import sibling_rank

ID_SCORE = 0.95
ID_TAG_SCORE = 0.94
CLASS_SCORE = 0.8
ALL_CLASSES_SCORE = 0.85
POSITION_SCORE = 0.75
SEMANTIC_TAG_SCORE = 0.9
SEMANTIC_ANY_SCORE = 0.88


def derive(target: TargetElement, config: GenerationConfig) -> list[Derivation]:
    """Emit one locator per identifying attribute, best first."""
    found: list[Derivation] = []
    tag = target.tag

    if element_id := target.id:
        predicate = attr_equals("id", element_id)
        found.append(Derivation(predicate_path("*", predicate), "attr:id", ID_SCORE))
        found.append(Derivation(predicate_path(tag, predicate), "attr:id", ID_TAG_SCORE))

    classes = target.classes
    for name in classes:
        predicate = has_class(name)
        found.append(Derivation(predicate_path("*", predicate), "attr:class", CLASS_SCORE))
        rank = sibling_rank(target, lambda node, name=name: name in node.classes)
        if rank:
            found.append(
                Derivation(
                    predicate_path(tag, predicate, position=rank),
                    "attr:class-position",
                    POSITION_SCORE,
                )
            )

    if len(classes) > 1:
        predicate = join("and", [has_class(name) for name in classes])
        found.append(Derivation(predicate_path("*", predicate), "attr:classes", ALL_CLASSES_SCORE))
        wanted = set(classes)
        rank = sibling_rank(target, lambda node: wanted.issubset(node.classes))
        if rank:
            found.append(
                Derivation(
                    predicate_path(tag, predicate, position=rank),
                    "attr:classes-position",
                    POSITION_SCORE,
                )
            )

    for name in config.semantic_attributes:
        value = target.get(name)
        if not value or not is_xpath_name(name):
            continue
        predicate = attr_equals(name, value)
        found.append(Derivation(predicate_path(tag, predicate), f"attr:{name}", SEMANTIC_TAG_SCORE))
        found.append(Derivation(predicate_path("*", predicate), f"attr:{name}", SEMANTIC_ANY_SCORE))

    return found
