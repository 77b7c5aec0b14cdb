"""Error functions used to measure how far network outputs are from targets."""

from __future__ import annotations

import math
from collections.abc import Iterable

__all__ = ["squared_error", "cross_entropy_error"]


def _pairs(outputs: Iterable[float], expected: Iterable[float]):
    try:
        yield from zip(outputs, expected, strict=True)
    except ValueError as exc:
        raise ValueError("outputs and expected values differ in length") from exc


def _log(value: float) -> float:
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def squared_error(outputs: Iterable[float], expected: Iterable[float]) -> float:
    """Return the sum of squared differences between outputs and targets."""
    return sum(((out - target) ** 2 for out, target in _pairs(outputs, expected)), 0.0)


def cross_entropy_error(outputs: Iterable[float], expected: Iterable[float]) -> float:
    """Return ``-sum(target * log(output))`` over the paired values."""
    return -sum((_log(out) * target for out, target in _pairs(outputs, expected)), 0.0)