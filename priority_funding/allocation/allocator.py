"""Proportional funding allocation.

Splits a fixed pool across scored regions in proportion to their priority
scores:

    amount[r] = total_pool * score(r) / sum(scores)
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ..models.funding_allocation import FundingAllocation
from ..models.region import ensure_unique_ids
from ..models.scored_region import ScoredRegion
from ..scorer.engine import EmptyRegionSetError

logger = logging.getLogger(__name__)


class DegenerateAllocationError(ValueError):
    """Raised when the score total cannot be used as a divisor.

    Covers a zero or non-finite total, and a negative total when the strict
    policy is selected.
    """


def allocate(
    scored_regions: Sequence[ScoredRegion],
    total_pool: float,
    strict: bool = False,
) -> FundingAllocation:
    """Allocate ``total_pool`` proportionally to priority scores.

    A negative score total (possible with negative weights) is passed through
    arithmetically unless ``strict`` is set; that can yield negative amounts
    for some regions and amounts above the pool for others.

    Args:
        scored_regions: Regions with their priority scores
        total_pool: Funding pool to split
        strict: Reject negative score totals

    Returns:
        FundingAllocation keyed by region id, in input order

    Raises:
        EmptyRegionSetError: If there are no regions
        DegenerateAllocationError: If the score total is zero, non-finite,
            or negative under the strict policy
        ValueError: If region ids are not unique, or the pool is not a
            positive finite number
    """
    if not math.isfinite(total_pool) or total_pool <= 0:
        raise ValueError(f"total_pool must be a positive finite number, got {total_pool}")

    if not scored_regions:
        raise EmptyRegionSetError("Cannot allocate funding across an empty region set")

    ensure_unique_ids(s.region for s in scored_regions)

    score_total = sum(s.priority_score for s in scored_regions)

    if not math.isfinite(score_total):
        raise DegenerateAllocationError(f"Score total is not finite ({score_total})")
    if score_total == 0:
        raise DegenerateAllocationError(
            f"Score total is zero across {len(scored_regions)} region(s); allocation is undefined"
        )
    if score_total < 0:
        if strict:
            raise DegenerateAllocationError(
                f"Score total is negative ({score_total:.4f}); rejected by strict allocation policy"
            )
        logger.warning(
            "allocation negative_score_total=%.4f regions=%d; amounts may fall outside [0, pool]",
            score_total,
            len(scored_regions),
        )

    amounts = {
        s.region_id: total_pool * s.priority_score / score_total
        for s in scored_regions
    }

    logger.info(
        "allocation_complete regions=%d total_pool=%.2f score_total=%.4f",
        len(amounts),
        total_pool,
        score_total,
    )
    return FundingAllocation(total_pool=total_pool, amounts=amounts)
