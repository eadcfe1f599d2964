"""FundingSnapshot - Read-only bundle handed to display collaborators."""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field

from ..scorer.weights import WeightVector
from .funding_allocation import FundingAllocation
from .scored_region import ScoredRegion


class FundingSnapshot(BaseModel):
    """Result of one scoring pass: weights used, ranked regions, allocation.

    Built fresh on every request; holding one does not track later weight
    changes.
    """

    country: Optional[str] = Field(None, description="Active country, if any")
    weights: WeightVector = Field(..., description="Weight vector used for this pass")
    ranked: list[ScoredRegion] = Field(..., description="Scored regions, highest priority first")
    allocation: FundingAllocation = Field(..., description="Proportional funding split")
    computed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}

    def funding_for(self, region_id: str) -> float:
        return self.allocation.amount_for(region_id)
