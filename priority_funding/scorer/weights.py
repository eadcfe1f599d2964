"""Scoring weight configuration system.

Supports externalized weight vectors loaded from JSON or YAML so operators
can save and restore the emphasis they dialled in.
"""

import json
import math
from enum import Enum
import yaml
from pathlib import Path
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator


class InvalidWeightError(ValueError):
    """Raised for a weight the engine cannot use (non-finite, unknown dimension, strict-mode negative)."""


class Dimension(str, Enum):
    """The four scoring dimensions, one weight each."""

    LAND_DEGRADATION = "land_degradation"
    WEALTH = "wealth"
    POPULATION_TREND = "population_trend"
    LUMINOSITY = "luminosity"

    @classmethod
    def parse(cls, value: "str | Dimension") -> "Dimension":
        """Resolve a dimension from its name or the short slider key (ld, pop, lum)."""
        if isinstance(value, Dimension):
            return value
        key = str(value).strip().lower().replace("-", "_")
        key = _SHORT_NAMES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise InvalidWeightError(f"Unknown weight dimension {value!r}. Use one of: {valid}") from None


_SHORT_NAMES = {
    "ld": "land_degradation",
    "landdegradation": "land_degradation",
    "pop": "population_trend",
    "populationtrend": "population_trend",
    "lum": "luminosity",
}


class WeightVector(BaseModel):
    """Operator emphasis across the four scoring dimensions.

    Weights are NOT required to sum to 1.0 and are not range-checked here:
    negative or >1 values are allowed for "negative emphasis" experiments.
    Only non-finite values are rejected. Instances are immutable; use
    ``with_weight`` to derive an updated vector.
    """

    land_degradation: float = Field(
        0.4, validation_alias=AliasChoices("land_degradation", "landDegradation", "ld")
    )
    wealth: float = 0.25
    population_trend: float = Field(
        0.2, validation_alias=AliasChoices("population_trend", "populationTrend", "pop")
    )
    luminosity: float = Field(0.15, validation_alias=AliasChoices("luminosity", "lum"))

    model_config = {"frozen": True}

    @field_validator('land_degradation', 'wealth', 'population_trend', 'luminosity')
    @classmethod
    def finite_weight(cls, v: float) -> float:
        """Ensure weights are finite numbers."""
        if not math.isfinite(v):
            raise ValueError(f"Weight must be a finite number, got {v}")
        return v

    def get(self, dimension: "str | Dimension") -> float:
        return getattr(self, Dimension.parse(dimension).value)

    def with_weight(self, dimension: "str | Dimension", value: float) -> "WeightVector":
        """Return a new vector with exactly one dimension replaced."""
        key = Dimension.parse(dimension).value
        if not math.isfinite(value):
            raise InvalidWeightError(f"Weight for {key} must be a finite number, got {value}")
        data = self.to_dict()
        data[key] = value
        return WeightVector(**data)

    def total(self) -> float:
        return self.land_degradation + self.wealth + self.population_trend + self.luminosity

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "land_degradation": self.land_degradation,
            "wealth": self.wealth,
            "population_trend": self.population_trend,
            "luminosity": self.luminosity,
        }


# Default emphasis of the weight sliders
DEFAULT_WEIGHTS = WeightVector(
    land_degradation=0.4,
    wealth=0.25,
    population_trend=0.2,
    luminosity=0.15,
)


_WEIGHT_FILE_SUFFIXES = ('.json', '.yaml', '.yml')


def _weight_file_path(filepath: str) -> Path:
    path = Path(filepath)
    if path.suffix not in _WEIGHT_FILE_SUFFIXES:
        raise ValueError(
            f"Unsupported file format: {path.suffix}. Use {', '.join(_WEIGHT_FILE_SUFFIXES)}"
        )
    return path


def load_weights(filepath: Optional[str] = None) -> WeightVector:
    """Restore a saved slider position, or DEFAULT_WEIGHTS when no file is given.

    Keys may use any name ``Dimension.parse`` accepts (``ld``,
    ``landDegradation``, ``land_degradation`` ...). Dimensions missing from
    the file keep their default emphasis.

    Raises:
        FileNotFoundError: If filepath is given but doesn't exist
        ValueError: If the format is unsupported or the file is not a mapping
        InvalidWeightError: Unknown dimension or non-finite weight in the file
    """
    if not filepath:
        return DEFAULT_WEIGHTS

    path = _weight_file_path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Weights file not found: {filepath}")

    with open(path, 'r') as f:
        data = json.load(f) if path.suffix == '.json' else yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Weights file must contain a mapping, got {type(data).__name__}")

    values = {Dimension.parse(key).value: value for key, value in data.items()}
    try:
        return WeightVector(**values)
    except ValidationError as exc:
        raise InvalidWeightError(f"Invalid weights in {filepath}: {exc}") from exc


def save_weights(weights: WeightVector, filepath: str) -> None:
    """Write the current emphasis under canonical dimension names.

    The extension picks the format; the file round-trips through load_weights.
    """
    path = _weight_file_path(filepath)
    data = weights.to_dict()

    with open(path, 'w') as f:
        if path.suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False)
