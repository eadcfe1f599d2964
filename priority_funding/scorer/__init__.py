"""Weighted priority scoring for funding regions."""

from .weights import (
    DEFAULT_WEIGHTS,
    Dimension,
    InvalidWeightError,
    WeightVector,
    load_weights,
    save_weights,
)
from .manager import WeightVectorManager
from .engine import EPSILON, EmptyRegionSetError, score_region, score_regions

__all__ = [
    "DEFAULT_WEIGHTS",
    "Dimension",
    "InvalidWeightError",
    "WeightVector",
    "load_weights",
    "save_weights",
    "WeightVectorManager",
    "EPSILON",
    "EmptyRegionSetError",
    "score_region",
    "score_regions",
]
