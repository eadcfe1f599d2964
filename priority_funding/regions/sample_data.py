"""Bundled sample catalog.

Fixture data for demos and tests: map centres for the countries offered by
the selector and three Algerian cities with illustrative indicator values.
Real deployments point REGIONS_FILE or REGIONS_URL at their own catalog.
"""

from ..models.region import Region
from .catalog import CountryEntry, RegionCatalog

COUNTRY_CENTERS: dict[str, tuple[float, float]] = {
    "Algeria": (28.0339, 1.6596),
    "Angola": (-11.2027, 17.8739),
    "Benin": (9.3077, 2.3158),
    "Botswana": (-22.3285, 24.6849),
    "Burkina Faso": (12.2383, -1.5616),
    "Burundi": (-3.3731, 29.9189),
    "Cameroon": (3.848, 11.5021),
    "Chad": (15.4542, 18.7322),
    "Democratic Republic of the Congo": (-4.0383, 21.7587),
    "Egypt": (26.8206, 30.8025),
    "Ethiopia": (9.145, 40.4897),
    "Ghana": (7.9465, -1.0232),
    "Kenya": (-1.2921, 36.8219),
    "Madagascar": (-18.7669, 46.8691),
    "Malawi": (-13.2543, 34.3015),
    "Mali": (17.5707, -3.9962),
    "Morocco": (31.7917, -7.0926),
    "Mozambique": (-18.6657, 35.5296),
    "Namibia": (-22.9576, 18.4904),
}

ALGERIA_REGIONS: tuple[Region, ...] = (
    Region(
        id=1,
        name="Algiers",
        coordinates=(36.7538, 3.0588),
        land_degradation=0.7,
        wealth=0.3,
        population_trend=0.5,
        luminosity=0.2,
        ndvi=0.6,
        night_lights=0.4,
    ),
    Region(
        id=2,
        name="Oran",
        coordinates=(35.6969, -0.6331),
        land_degradation=0.6,
        wealth=0.4,
        population_trend=0.4,
        luminosity=0.3,
        ndvi=0.7,
        night_lights=0.5,
    ),
    Region(
        id=3,
        name="Constantine",
        coordinates=(36.3650, 6.6147),
        land_degradation=0.8,
        wealth=0.2,
        population_trend=0.6,
        luminosity=0.5,
        ndvi=0.5,
        night_lights=0.6,
    ),
)

_REGIONS_BY_COUNTRY = {"Algeria": ALGERIA_REGIONS}

SAMPLE_CATALOG = RegionCatalog(
    CountryEntry(name=name, center=center, regions=_REGIONS_BY_COUNTRY.get(name, ()))
    for name, center in COUNTRY_CENTERS.items()
)
