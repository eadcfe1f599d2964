"""Interactive funding session.

Holds the active region set and the weight manager, and recomputes scores,
ranking and allocation from scratch on every request. Region sets are
small (tens of regions), so no incremental recomputation is attempted.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..allocation import allocate
from ..models.funding_snapshot import FundingSnapshot
from ..models.region import Region, ensure_unique_ids
from ..models.scored_region import ScoredRegion
from ..ranking import rank
from ..regions.catalog import RegionCatalog
from ..scorer.engine import score_regions
from ..scorer.manager import WeightVectorManager
from ..scorer.weights import Dimension, WeightVector

logger = logging.getLogger(__name__)


class FundingSession:
    """Single-operator session over one region catalog and funding pool.

    Args:
        catalog: Countries and their region sets.
        total_pool: Funding pool to split (positive).
        manager: Weight state holder; a fresh default one when omitted.
        country: Country to select initially; the first catalog entry when omitted.
        strict_allocation: Reject negative score totals instead of passing them through.
    """

    def __init__(
        self,
        catalog: RegionCatalog,
        total_pool: float,
        manager: Optional[WeightVectorManager] = None,
        country: Optional[str] = None,
        strict_allocation: bool = False,
    ) -> None:
        if not math.isfinite(total_pool) or total_pool <= 0:
            raise ValueError(f"total_pool must be a positive finite number, got {total_pool}")

        self.catalog = catalog
        self.total_pool = total_pool
        self.manager = manager or WeightVectorManager()
        self.strict_allocation = strict_allocation
        self.country: Optional[str] = None
        self._regions: tuple[Region, ...] = ()

        countries = catalog.countries()
        initial = country or (countries[0] if countries else None)
        if initial is not None:
            self.select_country(initial)

    @property
    def regions(self) -> tuple[Region, ...]:
        return self._regions

    @property
    def weights(self) -> WeightVector:
        return self.manager.get_weights()

    def select_country(self, country: str) -> tuple[float, float]:
        """Switch the active region set to ``country`` and return its map centre.

        Raises:
            KeyError: If the country is not in the catalog
        """
        regions = self.catalog.regions_for(country)
        self.country = country
        self._regions = regions
        logger.info("country_selected country=%s regions=%d", country, len(regions))
        return self.catalog.center_of(country)

    def replace_regions(self, regions: list[Region] | tuple[Region, ...]) -> None:
        """Replace the active region set wholesale with an externally supplied one."""
        regions = tuple(regions)
        ensure_unique_ids(regions)
        self.country = None
        self._regions = regions
        logger.info("regions_replaced regions=%d", len(regions))

    def set_weight(self, dimension: str | Dimension, value: float) -> WeightVector:
        return self.manager.set_weight(dimension, value)

    def snapshot(self) -> FundingSnapshot:
        """Score, rank and allocate the active region set with the current weights.

        Raises:
            EmptyRegionSetError: If the active region set is empty
            DegenerateAllocationError: If the scores cannot be normalised
        """
        weights = self.manager.get_weights()
        scored = score_regions(self._regions, weights)
        allocation = allocate(scored, self.total_pool, strict=self.strict_allocation)
        return FundingSnapshot(
            country=self.country,
            weights=weights,
            ranked=rank(scored),
            allocation=allocation,
        )

    def detail(self, region_id: str) -> tuple[ScoredRegion, float]:
        """Scored region and its allocated amount, for the detail panel.

        Raises:
            KeyError: If no region in the active set has this id
        """
        snapshot = self.snapshot()
        for scored in snapshot.ranked:
            if scored.region_id == region_id:
                return scored, snapshot.funding_for(region_id)
        raise KeyError(f"Unknown region id: {region_id!r}")
