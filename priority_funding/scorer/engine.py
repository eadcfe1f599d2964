"""Weighted priority scoring engine for funding regions.

Combines four indicators into one composite priority score per region.
"""

import logging
from typing import Iterable, List

from ..models.region import Region
from ..models.scored_region import ScoredRegion
from .weights import WeightVector

logger = logging.getLogger(__name__)

# Guards the luminosity divisor when a region is completely dark
EPSILON = 0.0001


class EmptyRegionSetError(ValueError):
    """Raised when scoring or allocation is invoked with no regions."""


def score_region(region: Region, weights: WeightVector) -> float:
    """Compute the priority score of a single region.

    Land degradation and the inverse of wealth and population trend are need
    signals that add to priority linearly. Luminosity enters through
    division, so near-zero economic activity sharply amplifies priority:

        ld * land_degradation
        + wealth * (1 - wealth)
        + pop * (1 - population_trend)
        + lum / (luminosity + EPSILON)

    The result is not clamped and is unbounded above. Pure and deterministic.
    Region rejects negative luminosity, so the divisor is at least EPSILON
    and the score is finite for every valid region and finite weights.

    Args:
        region: Region to score
        weights: Weight vector to apply

    Returns:
        Priority score
    """
    return (
        weights.land_degradation * region.land_degradation
        + weights.wealth * (1 - region.wealth)
        + weights.population_trend * (1 - region.population_trend)
        + weights.luminosity / (region.luminosity + EPSILON)
    )


def score_regions(regions: Iterable[Region], weights: WeightVector) -> List[ScoredRegion]:
    """Score every region in a set, preserving input order.

    Raises:
        EmptyRegionSetError: If the region set is empty
    """
    scored = [
        ScoredRegion(region=region, priority_score=score_region(region, weights))
        for region in regions
    ]
    if not scored:
        raise EmptyRegionSetError("Cannot score an empty region set")

    logger.debug("scored_regions count=%d", len(scored))
    return scored
