"""Proportional funding allocation across scored regions."""

from .allocator import DegenerateAllocationError, allocate

__all__ = ["DegenerateAllocationError", "allocate"]
