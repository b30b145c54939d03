"""Relationship locators built from parents, siblings and ancestors."""

from ..config import GenerationConfig
from ..models import Derivation, ElementNode, TargetElement
from ..xpath import attr_equals, has_class, predicate_path

PARENT_TAG_SCORE = 0.7
PARENT_ID_SCORE = 0.8
PARENT_CLASS_SCORE = 0.78
SIBLING_SCORE = 0.72
ANCESTOR_SCORE = 0.8


def _anchor(node: ElementNode) -> str | None:
    """Predicate identifying an ancestor by id, else by its first class."""
    if node.id:
        return attr_equals("id", node.id)
    if node.classes:
        return has_class(node.classes[0])
    return None


def derive(target: TargetElement, config: GenerationConfig) -> list[Derivation]:
    found: list[Derivation] = []
    tag = target.tag

    parent = target.parent
    if parent is not None:
        found.append(Derivation(f"//{parent.tag}/{tag}", "axes:parent", PARENT_TAG_SCORE))
        if parent.id:
            found.append(
                Derivation(
                    f"{predicate_path(parent.tag, attr_equals('id', parent.id))}/{tag}",
                    "axes:parent-id",
                    PARENT_ID_SCORE,
                )
            )
        if parent.classes:
            found.append(
                Derivation(
                    f"{predicate_path(parent.tag, has_class(parent.classes[0]))}/{tag}",
                    "axes:parent-class",
                    PARENT_CLASS_SCORE,
                )
            )

    if target.previous_tag == tag:
        found.append(
            Derivation(
                predicate_path(tag, f"preceding-sibling::*[1][self::{tag}]"),
                "axes:preceded-by",
                SIBLING_SCORE,
            )
        )
    if target.next_tag == tag:
        found.append(
            Derivation(
                predicate_path(tag, f"following-sibling::*[1][self::{tag}]"),
                "axes:followed-by",
                SIBLING_SCORE,
            )
        )

    # Walk upward, extending the child path one step per ancestor
    path = [tag]
    for depth, ancestor in enumerate(target.ancestors()):
        if depth >= config.max_ancestor_depth:
            break
        if anchor := _anchor(ancestor):
            found.append(
                Derivation(
                    f"{predicate_path(ancestor.tag, anchor)}/{'/'.join(path)}",
                    "axes:ancestor",
                    ANCESTOR_SCORE,
                )
            )
        path.insert(0, ancestor.tag)

    return found
