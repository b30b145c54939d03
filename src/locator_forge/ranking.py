"""Deduplication and ranking of locator candidates."""

from typing import Iterable

from .models import LocatorCandidate, ResultSet, ValidatedResult


def deduplicate(candidates: Iterable[LocatorCandidate]) -> list[LocatorCandidate]:
    """Keep one candidate per locator string.

    The most reliable instance wins; on a tie the first one seen is kept. The
    survivor takes the slot of the first occurrence.
    """
    slots: dict[str, int] = {}
    kept: list[LocatorCandidate] = []
    for candidate in candidates:
        index = slots.get(candidate.locator)
        if index is None:
            slots[candidate.locator] = len(kept)
            kept.append(candidate)
        elif candidate.reliability > kept[index].reliability:
            kept[index] = candidate
    return kept


def rank_candidates(candidates: Iterable[LocatorCandidate]) -> ResultSet:
    """Deduplicate, then order by descending reliability (stable)."""
    unique = deduplicate(candidates)
    ordered = sorted(unique, key=lambda c: c.reliability, reverse=True)
    return ResultSet(
        tuple(
            c if isinstance(c, ValidatedResult) else ValidatedResult.from_candidate(c)
            for c in ordered
        )
    )
