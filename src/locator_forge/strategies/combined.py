"""Locators that stack predicates from several strategies on one element."""

from ..config import GenerationConfig
from ..models import Derivation, TargetElement
from ..xpath import (
    attr_equals,
    contains_class,
    has_class,
    join,
    normalized_text_equals,
    predicate_path,
    text_equals,
)
from .base import sibling_rank


def derive(target: TargetElement, config: GenerationConfig) -> list[Derivation]:
    found: list[Derivation] = []
    tag = target.tag
    class_value = (target.get("class") or "").strip()

    if target.text and class_value:
        found.append(
            Derivation(
                predicate_path(tag, contains_class(class_value), text_equals(target.text)),
                "combined:class-text",
                0.95,
            )
        )
        found.append(
            Derivation(
                predicate_path(
                    tag, join("and", [contains_class(class_value), normalized_text_equals(target.text)])
                ),
                "combined:class-normalized-text",
                0.95,
            )
        )

    if target.id and class_value:
        element_id = target.id
        rank = sibling_rank(
            target,
            lambda node: node.id == element_id and class_value in (node.get("class") or ""),
        )
        found.append(
            Derivation(
                predicate_path(
                    tag,
                    attr_equals("id", element_id),
                    contains_class(class_value),
                    position=rank or 1,
                ),
                "combined:id-class-position",
                0.95,
            )
        )

    parent = target.parent
    if parent is not None and parent.classes and target.classes:
        parent_step = predicate_path(parent.tag, has_class(parent.classes[0]))
        found.append(
            Derivation(
                f"{parent_step}{predicate_path(tag, has_class(target.classes[0]))}",
                "combined:parent-child-class",
                0.93,
            )
        )

    return found
