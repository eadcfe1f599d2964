"""Configuration management for the priority funding engine."""

import math
from typing import Optional
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration from environment variables."""

    total_funding_pool: float = 1_000_000
    default_country: str = "Algeria"

    # Optional data sources; the bundled sample catalog is used when unset
    regions_file: Optional[str] = None
    regions_url: Optional[str] = None
    weights_file: Optional[str] = None

    # Validation policies (pass-through when False)
    strict_weights: bool = False
    strict_allocation: bool = False

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}

    @field_validator("total_funding_pool")
    @classmethod
    def positive_pool(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise ValueError(f"total_funding_pool must be a positive finite number, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {v!r}")
        return level


def validate_config() -> Config:
    """Load and validate configuration from environment.

    Raises ValueError with a descriptive message listing ALL invalid
    variables (not just the first one).
    """
    try:
        return Config()
    except ValidationError as exc:
        invalid = sorted({str(err["loc"][0]).upper() for err in exc.errors() if err.get("loc")})
        names = ", ".join(invalid) or "unknown"
        raise ValueError(
            f"Invalid environment variable(s): {names}. "
            "Please fix them in your .env file or environment."
        ) from exc


def load_config() -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config()
