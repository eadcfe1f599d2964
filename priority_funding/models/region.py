"""Region - Shared model for one funding candidate (country, city or sub-area)."""

import math
from typing import Iterable, Optional
from pydantic import BaseModel, Field, field_validator


class Region(BaseModel):
    """One funding candidate with its four scoring indicators.

    Regions are immutable for the lifetime of a session. When the active
    region set changes (country switch) the whole set is replaced.
    """

    # Identity
    region_id: str = Field(..., alias="id", description="Unique within a region set")
    name: str = Field(..., description="Display name")
    coordinates: tuple[float, float] = Field(..., description="(latitude, longitude)")

    # Scoring indicators, conventionally in [0, 1] but never clamped.
    # Luminosity alone must be non-negative.
    land_degradation: float = Field(..., alias="landDegradation", description="Land-degradation index")
    wealth: float = Field(..., description="Wealth index")
    population_trend: float = Field(..., alias="populationTrend", description="Population-trend index")
    luminosity: float = Field(..., description="Night-time luminosity (economic-activity proxy)")

    # Display-only, carried through untouched
    area: Optional[float] = Field(None, description="Area in km²")
    population: Optional[int] = Field(None, description="Resident population")
    ndvi: Optional[float] = Field(None, description="Vegetation index")
    night_lights: Optional[float] = Field(None, alias="nightLights", description="Economic activity")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "id": "1",
                "name": "Algiers",
                "coordinates": [36.7538, 3.0588],
                "landDegradation": 0.7,
                "wealth": 0.3,
                "populationTrend": 0.5,
                "luminosity": 0.2,
                "ndvi": 0.6,
                "nightLights": 0.4,
            }
        },
    }

    @field_validator("region_id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Numeric ids from fixture tables are stored as strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("coordinates")
    @classmethod
    def coordinate_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        lat, lon = v
        if not -90 <= lat <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {lat}")
        if not -180 <= lon <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {lon}")
        return v

    @field_validator("land_degradation", "wealth", "population_trend", "luminosity")
    @classmethod
    def finite_indicator(cls, v: float) -> float:
        """Indicators must be finite; range is deliberately not enforced."""
        if not math.isfinite(v):
            raise ValueError(f"Indicator must be a finite number, got {v}")
        return v

    @field_validator("luminosity")
    @classmethod
    def non_negative_luminosity(cls, v: float) -> float:
        """Luminosity is a divisor in the score; below zero it can cancel EPSILON."""
        if v < 0:
            raise ValueError(f"Luminosity must be >= 0, got {v}")
        return v

    @property
    def latitude(self) -> float:
        return self.coordinates[0]

    @property
    def longitude(self) -> float:
        return self.coordinates[1]


def ensure_unique_ids(regions: Iterable[Region]) -> None:
    """Raise ValueError if two regions in a set share an identifier."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for region in regions:
        if region.region_id in seen:
            duplicates.append(region.region_id)
        seen.add(region.region_id)
    if duplicates:
        raise ValueError(f"Duplicate region id(s) in region set: {', '.join(duplicates)}")
