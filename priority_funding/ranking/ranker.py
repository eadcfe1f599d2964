"""Region ranking by priority score.

Ordering is descending by score and stable: regions with equal scores keep
their relative order from the input region set.
"""

from typing import Iterable, List

from ..models.scored_region import ScoredRegion


def rank(scored_regions: Iterable[ScoredRegion]) -> List[ScoredRegion]:
    """Return scored regions sorted highest priority first.

    An empty input yields an empty list.
    """
    # sorted() stays stable with reverse=True
    return sorted(scored_regions, key=lambda s: s.priority_score, reverse=True)


def top(scored_regions: Iterable[ScoredRegion], n: int) -> List[ScoredRegion]:
    """The ``n`` highest-priority regions, in ranked order."""
    if n <= 0:
        return []
    return rank(scored_regions)[:n]


def bottom(scored_regions: Iterable[ScoredRegion], n: int) -> List[ScoredRegion]:
    """The ``n`` lowest-priority regions, still in ranked (descending) order."""
    if n <= 0:
        return []
    return rank(scored_regions)[-n:]
