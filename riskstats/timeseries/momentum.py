"""
Rate-of-change family: percentage change, raw momentum and discrete derivatives.
"""

from __future__ import annotations

from typing import Iterable, List

from riskstats.core.validation import as_values, require_positive_int


def roc(data: Iterable[float], period: int) -> List[float]:
    """
    Percentage change versus the value `period` steps earlier.

    A zero prior value yields 0 rather than an infinite change.
    """
    period = require_positive_int(period, "period")
    values = as_values(data)
    result: List[float] = []
    for i in range(period, len(values)):
        prior = values[i - period]
        if prior == 0:
            result.append(0.0)
        else:
            result.append((values[i] - prior) / prior * 100.0)
    return result


def momentum(data: Iterable[float], period: int) -> List[float]:
    """Raw difference versus the value `period` steps earlier."""
    period = require_positive_int(period, "period")
    values = as_values(data)
    return [values[i] - values[i - period] for i in range(period, len(values))]


def velocity(data: Iterable[float]) -> List[float]:
    """First discrete difference (n - 1 points)."""
    values = as_values(data)
    return [values[i] - values[i - 1] for i in range(1, len(values))]


def acceleration(data: Iterable[float]) -> List[float]:
    """Second discrete difference (n - 2 points)."""
    return velocity(velocity(data))
