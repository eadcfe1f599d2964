"""ScoredRegion - A region paired with its derived priority score."""

from pydantic import BaseModel, Field

from .region import Region


class ScoredRegion(BaseModel):
    """Region plus priority score.

    Derived on every scoring pass and never persisted apart from its region.
    The score is unbounded above because of the luminosity term.
    """

    region: Region = Field(..., description="Source region")
    priority_score: float = Field(..., description="Weighted composite priority score")

    model_config = {"frozen": True}

    @property
    def region_id(self) -> str:
        return self.region.region_id

    @property
    def name(self) -> str:
        return self.region.name
