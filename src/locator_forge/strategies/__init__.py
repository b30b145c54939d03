"""Locator derivation strategies, in emission order."""

from ..models import Strategy
from . import attribute, axes, combined, contains, logical, text
from .base import StrategyFn, sibling_rank

STRATEGIES: dict[Strategy, StrategyFn] = {
    Strategy.ATTRIBUTE: attribute.derive,
    Strategy.TEXT_BASED: text.derive,
    Strategy.CONTAINS: contains.derive,
    Strategy.AXES: axes.derive,
    Strategy.LOGICAL: logical.derive,
    Strategy.COMBINED: combined.derive,
}

__all__ = ["STRATEGIES", "StrategyFn", "sibling_rank"]
