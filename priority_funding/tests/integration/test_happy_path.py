"""End-to-end: configuration → region source → weights → session → display."""

import os

import httpx
import pytest
import respx

from priority_funding.config import load_config
from priority_funding.main import build_session
from priority_funding.reporter import build_region_cards, render_table
from priority_funding.scorer import EPSILON


def test_file_catalog_session(isolated_env, kenya_yaml):
    os.environ["REGIONS_FILE"] = str(kenya_yaml)
    os.environ["DEFAULT_COUNTRY"] = "Kenya"
    os.environ["TOTAL_FUNDING_POOL"] = "5000000"

    session = build_session(load_config())
    snapshot = session.snapshot()

    # Turkana is completely dark: its luminosity term alone is 0.15 / EPSILON
    names = [s.name for s in snapshot.ranked]
    assert names == ["Turkana", "Kitui", "Nairobi"]
    assert snapshot.ranked[0].priority_score > 0.15 / EPSILON
    assert sum(snapshot.allocation.amounts.values()) == pytest.approx(5_000_000)
    assert abs(snapshot.allocation.rounding_drift()) <= 1.5

    cards = build_region_cards(snapshot)
    assert cards[0]["region_id"] == "KE-TUR"
    assert cards[0]["population"] == 926976


def test_operator_reweighting_flow(isolated_env, kenya_yaml, tmp_path):
    weights_path = tmp_path / "weights.yaml"
    weights_path.write_text("ld: 0.5\nwealth: 0.5\npop: 0\nlum: 0\n")
    os.environ["REGIONS_FILE"] = str(kenya_yaml)
    os.environ["WEIGHTS_FILE"] = str(weights_path)

    session = build_session(load_config(), country="Kenya")
    before = session.snapshot()

    session.set_weight("lum", 0.15)
    after = session.snapshot()

    assert [s.name for s in before.ranked] == ["Turkana", "Kitui", "Nairobi"]
    assert after.funding_for("KE-TUR") > before.funding_for("KE-TUR")
    assert after.funding_for("KE-NBO") < before.funding_for("KE-NBO")

    session.select_country("Ghana")
    assert session.regions == ()


@respx.mock
def test_http_catalog_session(isolated_env, kenya_catalog):
    url = "https://data.example.org/regions.json"
    respx.get(url).mock(return_value=httpx.Response(200, json=kenya_catalog))
    os.environ["REGIONS_URL"] = url

    session = build_session(load_config(), country="Kenya")
    table = render_table(session.snapshot())

    assert table.index("Turkana") < table.index("Kitui") < table.index("Nairobi")
    assert "Pool: $1000000" in table
