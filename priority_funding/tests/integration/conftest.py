"""Integration test fixtures: catalog files on disk and a scrubbed environment."""

import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

# Ensure paths are set
_pkg_root = Path(__file__).resolve().parent.parent.parent  # priority_funding/
_repo_root = _pkg_root.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

from priority_funding.tests.factories import clean_env  # noqa: E402


KENYA_CATALOG = {
    "countries": {
        "Kenya": {
            "center": [-1.2921, 36.8219],
            "regions": [
                {
                    "id": "KE-TUR",
                    "name": "Turkana",
                    "coordinates": [3.1166, 35.5966],
                    "landDegradation": 0.9,
                    "wealth": 0.1,
                    "populationTrend": 0.7,
                    "luminosity": 0.0,
                    "population": 926976,
                },
                {
                    "id": "KE-NBO",
                    "name": "Nairobi",
                    "coordinates": [-1.2921, 36.8219],
                    "landDegradation": 0.2,
                    "wealth": 0.8,
                    "populationTrend": 0.9,
                    "luminosity": 0.95,
                    "population": 4397073,
                },
                {
                    "id": "KE-KIT",
                    "name": "Kitui",
                    "coordinates": [-1.3667, 38.0106],
                    "landDegradation": 0.6,
                    "wealth": 0.3,
                    "populationTrend": 0.4,
                    "luminosity": 0.1,
                },
            ],
        },
        "Ghana": {"center": [7.9465, -1.0232], "regions": []},
    }
}


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run from an empty directory with no configuration variables set."""
    monkeypatch.chdir(tmp_path)
    with patch.dict(os.environ, clean_env(), clear=True):
        yield tmp_path


@pytest.fixture
def kenya_catalog():
    return json.loads(json.dumps(KENYA_CATALOG))


@pytest.fixture
def kenya_yaml(tmp_path, kenya_catalog):
    path = tmp_path / "kenya.yaml"
    path.write_text(yaml.safe_dump(kenya_catalog))
    return path
