"""Region catalogs and the sources they are loaded from."""

from .catalog import CountryEntry, RegionCatalog
from .sample_data import COUNTRY_CENTERS, SAMPLE_CATALOG
from .sources import (
    BaseRegionSource,
    FileRegionSource,
    HttpRegionSource,
    RegionSourceError,
    StaticRegionSource,
)

__all__ = [
    "CountryEntry",
    "RegionCatalog",
    "COUNTRY_CENTERS",
    "SAMPLE_CATALOG",
    "BaseRegionSource",
    "FileRegionSource",
    "HttpRegionSource",
    "RegionSourceError",
    "StaticRegionSource",
]
