"""Display formatting of funding snapshots."""

from .formatters import (
    build_chart_series,
    build_region_cards,
    format_funding,
    format_score,
    rank_color,
    render_table,
)

__all__ = [
    "build_chart_series",
    "build_region_cards",
    "format_funding",
    "format_score",
    "rank_color",
    "render_table",
]
