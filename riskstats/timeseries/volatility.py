"""
Rolling volatility measures.
"""

from __future__ import annotations

from typing import Iterable, List

from riskstats.core.validation import as_values, require_positive_int
from riskstats.stats import coefficient_of_variation, standard_deviation

from .moving_averages import sma


def _windows(values: List[float], window: int) -> List[List[float]]:
    window = min(window, len(values))
    return [values[i - window + 1 : i + 1] for i in range(window - 1, len(values))]


def rolling_volatility(data: Iterable[float], window: int) -> List[float]:
    """Population standard deviation of each trailing window (n - window + 1 points)."""
    window = require_positive_int(window, "window")
    values = as_values(data)
    if not values:
        return []
    return [standard_deviation(chunk) for chunk in _windows(values, window)]


def average_absolute_change(data: Iterable[float], window: int) -> List[float]:
    """ATR-style volatility: SMA of absolute first differences."""
    window = require_positive_int(window, "window")
    values = as_values(data)
    changes = [abs(values[i] - values[i - 1]) for i in range(1, len(values))]
    return sma(changes, window)


def rolling_cv(data: Iterable[float], window: int) -> List[float]:
    """Coefficient of variation (percent) of each trailing window."""
    window = require_positive_int(window, "window")
    values = as_values(data)
    if not values:
        return []
    return [coefficient_of_variation(chunk) for chunk in _windows(values, window)]
