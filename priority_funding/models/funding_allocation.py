"""FundingAllocation - Output model of the proportional funding split."""

from decimal import Decimal, ROUND_HALF_UP
from pydantic import BaseModel, Field


def round_currency(amount: float) -> int:
    """Round to a whole currency unit, halves away from zero.

    Works on the exact binary value of the float so that e.g. 2.5 -> 3 and
    -2.5 -> -3, matching how the dashboard formatted amounts.
    """
    return int(Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class FundingAllocation(BaseModel):
    """Mapping of region id to allocated amount for one complete pass.

    Amounts sum to ``total_pool`` up to float error. Display rounding is
    applied per region with no largest-remainder correction, so the rounded
    sum may drift from the pool by a few units.
    """

    total_pool: float = Field(..., description="Pool that was split")
    amounts: dict[str, float] = Field(default_factory=dict, description="region_id -> amount")

    model_config = {"frozen": True}

    def amount_for(self, region_id: str) -> float:
        """Return the unrounded amount for a region (KeyError if unknown)."""
        return self.amounts[region_id]

    def rounded(self) -> dict[str, int]:
        """Per-region amounts rounded independently for display."""
        return {region_id: round_currency(amount) for region_id, amount in self.amounts.items()}

    def rounded_total(self) -> int:
        return sum(self.rounded().values())

    def rounding_drift(self) -> float:
        """Displayed total minus the pool; accepted, never corrected."""
        return self.rounded_total() - self.total_pool
