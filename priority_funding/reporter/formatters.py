"""Display formatters for funding snapshots.

Turns a FundingSnapshot into plain dicts and text for the map tooltips,
detail panel, indicator chart and CLI table. No scoring happens here.
"""

from __future__ import annotations

from typing import Any

from ..models.funding_allocation import round_currency
from ..models.funding_snapshot import FundingSnapshot


# Marker colours by rank: red, orange, green
RANK_COLORS = ["#ff0000", "#ffa500", "#00ff00"]
DEFAULT_COLOR = "#808080"


def rank_color(index: int) -> str:
    """Marker colour for a 0-based rank position."""
    if 0 <= index < len(RANK_COLORS):
        return RANK_COLORS[index]
    return DEFAULT_COLOR


def format_score(score: float) -> str:
    return f"{score:.2f}"


def format_funding(amount: float) -> str:
    """Dollar amount rounded to the whole unit, e.g. ``$250000``."""
    return f"${round_currency(amount)}"


def build_region_cards(snapshot: FundingSnapshot) -> list[dict[str, Any]]:
    """One card per region in ranked order, for map markers and the detail panel."""
    rounded = snapshot.allocation.rounded()
    cards = []
    for index, scored in enumerate(snapshot.ranked):
        region = scored.region
        cards.append(
            {
                "rank": index + 1,
                "region_id": region.region_id,
                "name": region.name,
                "coordinates": list(region.coordinates),
                "priority_score": format_score(scored.priority_score),
                "funding": rounded[region.region_id],
                "funding_display": f"${rounded[region.region_id]}",
                "color": rank_color(index),
                "area": region.area,
                "population": region.population,
            }
        )
    return cards


def build_chart_series(snapshot: FundingSnapshot) -> list[dict[str, Any]]:
    """Vegetation index and economic activity bars per region, ranked order."""
    return [
        {
            "name": scored.name,
            "ndvi": scored.region.ndvi,
            "night_lights": scored.region.night_lights,
        }
        for scored in snapshot.ranked
    ]


def render_table(snapshot: FundingSnapshot) -> str:
    """Plain-text ranking table."""
    cards = build_region_cards(snapshot)
    name_width = max([len("Region")] + [len(c["name"]) for c in cards])

    header = f"{'#':>3}  {'Region':<{name_width}}  {'Score':>10}  {'Funding':>14}"
    lines = [header, "-" * len(header)]
    for card in cards:
        lines.append(
            f"{card['rank']:>3}  {card['name']:<{name_width}}  "
            f"{card['priority_score']:>10}  {card['funding_display']:>14}"
        )
    lines.append("-" * len(header))

    allocation = snapshot.allocation
    lines.append(
        f"Pool: {format_funding(allocation.total_pool)}  "
        f"Displayed total: ${allocation.rounded_total()}  "
        f"Drift: {allocation.rounding_drift():+.0f}"
    )
    weights = snapshot.weights
    lines.append(
        f"Weights: ld={weights.land_degradation} wealth={weights.wealth} "
        f"pop={weights.population_trend} lum={weights.luminosity}"
    )
    return "\n".join(lines)
