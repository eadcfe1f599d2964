"""Weight vector state holder.

One writer path (``set_weight``), any number of readers. Every read is a
snapshot: the held WeightVector is immutable and replaced on each update.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .weights import DEFAULT_WEIGHTS, Dimension, InvalidWeightError, WeightVector

logger = logging.getLogger(__name__)

WeightListener = Callable[[WeightVector], None]


class WeightVectorManager:
    """Owns the current weight vector and notifies subscribers of changes.

    Args:
        initial: Starting vector (defaults to DEFAULT_WEIGHTS).
        strict: When True, negative weights raise InvalidWeightError, both in
            ``initial`` and on every update. When False (default) any finite
            value passes through unchanged.
    """

    def __init__(self, initial: Optional[WeightVector] = None, strict: bool = False) -> None:
        self._initial = initial or DEFAULT_WEIGHTS
        self.strict = strict
        if strict:
            for dim in Dimension:
                self._check_strict(dim, self._initial.get(dim))
        self._weights = self._initial
        self._listeners: list[WeightListener] = []

    def get_weights(self) -> WeightVector:
        return self._weights

    def set_weight(self, dimension: str | Dimension, value: float) -> WeightVector:
        """Update exactly one dimension and return the new full vector.

        Raises:
            InvalidWeightError: Unknown dimension, non-finite value, or a
                negative value under the strict policy.
        """
        dim = Dimension.parse(dimension)
        if self.strict:
            self._check_strict(dim, value)

        updated = self._weights.with_weight(dim, value)
        previous = self._weights.get(dim)
        self._weights = updated
        logger.debug("weight_update dimension=%s old=%s new=%s", dim.value, previous, value)

        self._notify(updated)
        return updated

    def reset(self) -> WeightVector:
        """Restore the initial vector."""
        self._weights = self._initial
        self._notify(self._weights)
        return self._weights

    def subscribe(self, listener: WeightListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @staticmethod
    def _check_strict(dim: Dimension, value: float) -> None:
        if value < 0:
            raise InvalidWeightError(f"Weight for {dim.value} must be >= 0 in strict mode, got {value}")

    def _notify(self, weights: WeightVector) -> None:
        for listener in list(self._listeners):
            listener(weights)
