"""Shared Pydantic models for the priority funding engine."""

from .region import Region, ensure_unique_ids
from .scored_region import ScoredRegion
from .funding_allocation import FundingAllocation, round_currency
from .funding_snapshot import FundingSnapshot

__all__ = [
    "Region",
    "ensure_unique_ids",
    "ScoredRegion",
    "FundingAllocation",
    "round_currency",
    "FundingSnapshot",
]
