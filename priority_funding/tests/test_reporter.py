"""Tests for snapshot display formatters."""

import pytest

from priority_funding.reporter import (
    build_chart_series,
    build_region_cards,
    format_funding,
    format_score,
    rank_color,
    render_table,
)
from priority_funding.regions import SAMPLE_CATALOG
from priority_funding.session import FundingSession


@pytest.fixture
def algeria_snapshot():
    return FundingSession(SAMPLE_CATALOG, 1_000_000, country="Algeria").snapshot()


def test_format_score():
    assert format_score(1.304625) == "1.30"
    assert format_score(1500.0) == "1500.00"


def test_format_funding_rounds_half_away_from_zero():
    assert format_funding(250_000.4) == "$250000"
    assert format_funding(249_999.5) == "$250000"
    assert format_funding(-2.5) == "$-3"


def test_rank_colors():
    assert [rank_color(i) for i in range(3)] == ["#ff0000", "#ffa500", "#00ff00"]
    assert rank_color(3) == "#808080"


def test_region_cards_in_ranked_order(algeria_snapshot):
    cards = build_region_cards(algeria_snapshot)

    assert [c["name"] for c in cards] == ["Algiers", "Oran", "Constantine"]
    assert [c["rank"] for c in cards] == [1, 2, 3]
    assert cards[0]["color"] == "#ff0000"
    assert cards[0]["priority_score"] == "1.30"
    assert cards[0]["coordinates"] == [36.7538, 3.0588]
    assert cards[0]["funding_display"] == f"${cards[0]['funding']}"
    assert abs(sum(c["funding"] for c in cards) - 1_000_000) <= 1.5


def test_chart_series(algeria_snapshot):
    series = build_chart_series(algeria_snapshot)

    assert series[0] == {"name": "Algiers", "ndvi": 0.6, "night_lights": 0.4}
    assert [s["name"] for s in series] == ["Algiers", "Oran", "Constantine"]


def test_render_table(algeria_snapshot):
    table = render_table(algeria_snapshot)

    lines = table.splitlines()
    assert "Region" in lines[0]
    assert "Algiers" in lines[2]
    assert "Constantine" in lines[4]
    assert "Pool: $1000000" in table
    assert "Drift:" in table
    assert "ld=0.4 wealth=0.25 pop=0.2 lum=0.15" in table
