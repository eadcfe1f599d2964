"""Pytest configuration and fixtures."""

import pytest

from priority_funding.models import Region


@pytest.fixture
def algiers():
    """Algiers as shipped in the sample catalog."""
    return Region(
        id=1,
        name="Algiers",
        coordinates=(36.7538, 3.0588),
        landDegradation=0.7,
        wealth=0.3,
        populationTrend=0.5,
        luminosity=0.2,
        ndvi=0.6,
        nightLights=0.4,
    )


@pytest.fixture
def sample_catalog_dict():
    """Serialized catalog with one populated and one empty country."""
    return {
        "countries": {
            "Algeria": {
                "center": [28.0339, 1.6596],
                "regions": [
                    {
                        "id": 1,
                        "name": "Algiers",
                        "coordinates": [36.7538, 3.0588],
                        "landDegradation": 0.7,
                        "wealth": 0.3,
                        "populationTrend": 0.5,
                        "luminosity": 0.2,
                    },
                    {
                        "id": 2,
                        "name": "Oran",
                        "coordinates": [35.6969, -0.6331],
                        "landDegradation": 0.6,
                        "wealth": 0.4,
                        "populationTrend": 0.4,
                        "luminosity": 0.3,
                        "area": 2121.0,
                        "population": 1560329,
                    },
                ],
            },
            "Mali": {"center": [17.5707, -3.9962], "regions": []},
        }
    }
