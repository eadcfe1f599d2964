"""Deterministic ordering of scored regions."""

from .ranker import bottom, rank, top

__all__ = ["rank", "top", "bottom"]
