"""Locators joining attribute and text predicates with AND / OR."""

from ..config import GenerationConfig
from ..models import Derivation, TargetElement
from ..xpath import attr_equals, contains, is_xpath_name, join, normalized_text_equals, predicate_path

AND_SCORE = 0.9
OR_SCORE = 0.8


def derive(target: TargetElement, config: GenerationConfig) -> list[Derivation]:
    found: list[Derivation] = []
    tag = target.tag
    predicates = [
        attr_equals(name, value)
        for name, value in target.attributes.items()
        if value and is_xpath_name(name)
    ]

    if len(predicates) >= 2:
        found.append(Derivation(predicate_path(tag, join("and", predicates[:2])), "logical:and", AND_SCORE))
    if len(predicates) >= 3:
        found.append(Derivation(predicate_path(tag, join("and", predicates[:3])), "logical:and3", AND_SCORE))
    if len(predicates) >= 2:
        found.append(Derivation(predicate_path(tag, join("or", predicates[:2])), "logical:or", OR_SCORE))

    if target.text and predicates:
        first = predicates[0]
        found.append(
            Derivation(
                predicate_path(tag, join("and", [first, normalized_text_equals(target.text)])),
                "logical:and-text",
                AND_SCORE,
            )
        )
        found.append(
            Derivation(
                predicate_path(tag, join("or", [first, contains("text()", target.text)])),
                "logical:or-text",
                OR_SCORE,
            )
        )

    return found
