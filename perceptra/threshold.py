"""Activation-function wrapper that turns an output into a binary decision."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["Threshold"]


class Threshold:
    """Wrap an activation function and cut its output at a percentage threshold.

    ``threshold`` is an integer percentage between 0 and 100. The wrapped
    output is reported as 1.0 when it is strictly above ``threshold / 100``
    and 0.0 otherwise. Every other operation is delegated unchanged.
    """

    def __init__(self, func: Any, threshold: int) -> None:
        if not 0 <= threshold <= 100:
            raise ValueError(f"invalid threshold {threshold}: must be within 0..100")
        self.func = func
        self.threshold = threshold

    def calculate(self, total: float, dot_products: Sequence[float]) -> float:
        """Apply the wrapped function, then the threshold."""
        limit = self.threshold / 100.0
        return 1.0 if self.func.calculate(total, dot_products) > limit else 0.0

    def sum(self, values: Iterable[float], start: float) -> float:
        """Delegate to the wrapped function's sum."""
        return self.func.sum(values, start)

    def delta(self, output: float, expected_output: float) -> float:
        """Delegate to the wrapped function's delta."""
        return self.func.delta(output, expected_output)

    def derivate(self, output: float) -> float:
        """Delegate to the wrapped function's derivative."""
        return self.func.derivate(output)