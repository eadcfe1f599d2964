"""Stateful wiring of weights, region set, scoring and allocation."""

from .funding_session import FundingSession

__all__ = ["FundingSession"]
