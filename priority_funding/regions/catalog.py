"""Country -> region set lookup.

Backs the country selector: each country has a map centre and a (possibly
empty) set of candidate regions. Selecting a country swaps the whole active
region set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from ..models.region import Region, ensure_unique_ids


@dataclass(frozen=True)
class CountryEntry:
    """Map centre plus candidate regions for one country."""

    name: str
    center: tuple[float, float]
    regions: tuple[Region, ...] = field(default_factory=tuple)


class RegionCatalog:
    """Immutable collection of countries and their region sets."""

    def __init__(self, entries: Iterable[CountryEntry]) -> None:
        self._entries: dict[str, CountryEntry] = {}
        for entry in entries:
            ensure_unique_ids(entry.regions)
            self._entries[entry.name] = entry

    def __contains__(self, country: str) -> bool:
        return country in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def countries(self) -> list[str]:
        """Country names in catalog order."""
        return list(self._entries)

    def center_of(self, country: str) -> tuple[float, float]:
        return self._entry(country).center

    def regions_for(self, country: str) -> tuple[Region, ...]:
        """Region set for a country; empty when no region data is available."""
        return self._entry(country).regions

    def _entry(self, country: str) -> CountryEntry:
        try:
            return self._entries[country]
        except KeyError:
            raise KeyError(f"Unknown country: {country!r}") from None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RegionCatalog":
        """Build a catalog from its serialized form.

        Expected format:
        {
          "countries": {
            "Algeria": {
              "center": [28.0339, 1.6596],
              "regions": [
                {"id": 1, "name": "Algiers", "coordinates": [36.75, 3.06],
                 "landDegradation": 0.7, "wealth": 0.3,
                 "populationTrend": 0.5, "luminosity": 0.2}
              ]
            }
          }
        }

        Raises:
            ValueError: On a malformed document or duplicate region ids
        """
        countries = data.get("countries") if isinstance(data, dict) else None
        if not isinstance(countries, dict):
            raise ValueError("Region catalog must contain a 'countries' mapping")

        entries = []
        for name, body in countries.items():
            center = body.get("center")
            if not center or len(center) != 2:
                raise ValueError(f"Country {name!r} needs a [lat, lon] 'center'")
            regions = tuple(Region(**row) for row in body.get("regions", []))
            entries.append(
                CountryEntry(name=name, center=(float(center[0]), float(center[1])), regions=regions)
            )
        return cls(entries)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the ``from_dict`` format."""
        return {
            "countries": {
                entry.name: {
                    "center": list(entry.center),
                    "regions": [
                        region.model_dump(by_alias=True, exclude_none=True, mode="json")
                        for region in entry.regions
                    ],
                }
                for entry in self._entries.values()
            }
        }
