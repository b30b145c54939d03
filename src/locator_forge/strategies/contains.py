"""Partial-match locators over a fixed attribute allowlist."""

from ..config import GenerationConfig
from ..models import Derivation, TargetElement
from ..xpath import contains, contains_ignore_case, ends_with, is_xpath_name, predicate_path, starts_with


def derive(target: TargetElement, config: GenerationConfig) -> list[Derivation]:
    found: list[Derivation] = []

    for name in config.contains_attributes:
        value = target.get(name)
        if not value or not is_xpath_name(name):
            continue
        ref = f"@{name}"
        found.extend(
            [
                Derivation(predicate_path("*", contains(ref, value)), f"contains:{name}", 0.85),
                Derivation(
                    predicate_path("*", contains_ignore_case(ref, value)),
                    f"contains:{name}:ignore-case",
                    0.84,
                ),
                Derivation(predicate_path("*", starts_with(ref, value)), f"contains:{name}:prefix", 0.83),
                Derivation(predicate_path("*", ends_with(ref, value)), f"contains:{name}:suffix", 0.82),
            ]
        )

    return found
