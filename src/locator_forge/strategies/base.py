"""Shared types and helpers for locator strategies."""

from typing import Callable

from ..config import GenerationConfig
from ..models import Derivation, ElementNode, TargetElement

StrategyFn = Callable[[TargetElement, GenerationConfig], list[Derivation]]


def sibling_rank(target: TargetElement, matcher: Callable[[ElementNode], bool]) -> int | None:
    """1-based rank of the target among same-tag siblings accepted by ``matcher``.

    Returns None when at most one sibling matches, i.e. when no position
    qualifier is needed.
    """
    total = 0
    own: int | None = None
    for index, node in enumerate(target.siblings, start=1):
        if not matcher(node):
            continue
        total += 1
        if index == target.position:
            own = total
    if total > 1:
        return own
    return None
