"""
Trend detection via least-squares regression against the index.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from riskstats.core.config import config
from riskstats.core.exceptions import InvalidArgumentError
from riskstats.core.validation import as_values, require_non_negative, require_positive_int
from riskstats.stats import linear_regression

from .schema import TrendDirection, TrendResult


def _slope(values: List[float]) -> float:
    return linear_regression(range(len(values)), values).slope


def detect_trend(data: Iterable[float], epsilon: Optional[float] = None) -> TrendResult:
    """
    Detect the overall linear trend.

    Args:
        data: Series ordered by time
        epsilon: |slope| below this is flat (config.trend.flat_epsilon if None)

    Returns:
        TrendResult; fewer than two points yield a flat, zero-strength trend
    """
    if epsilon is None:
        epsilon = config.trend.flat_epsilon
    epsilon = require_non_negative(epsilon, "epsilon")
    values = as_values(data)
    n = len(values)
    if n < 2:
        return TrendResult()

    fit = linear_regression(range(n), values)
    if abs(fit.slope) < epsilon:
        direction = TrendDirection.FLAT
    elif fit.slope > 0:
        direction = TrendDirection.UP
    else:
        direction = TrendDirection.DOWN

    size_factor = min(n / config.trend.full_confidence_points, 1.0)
    return TrendResult(
        direction=direction,
        slope=fit.slope,
        strength=fit.r2,
        confidence=fit.r2 * size_factor,
    )


def detect_trend_changes(
    data: Iterable[float],
    window: int = 5,
    min_slope: Optional[float] = None,
) -> List[int]:
    """
    Find reversal points (peaks and troughs) of the local trend.

    For each index i, the left window ends at i and the right window starts
    at i. i is reported when the two local slopes have opposite signs and
    both reach min_slope in magnitude. A reversal spread over adjacent
    indices reports only the one with the largest slope difference.
    """
    window = require_positive_int(window, "window")
    if window < 2:
        raise InvalidArgumentError("window must be at least 2 to fit a local slope")
    if min_slope is None:
        min_slope = config.trend.change_min_slope
    min_slope = require_non_negative(min_slope, "min_slope")

    values = as_values(data)
    n = len(values)
    candidates: List[Tuple[int, float]] = []
    for i in range(window - 1, n - window + 1):
        left = _slope(values[i - window + 1 : i + 1])
        right = _slope(values[i : i + window])
        if abs(left) < min_slope or abs(right) < min_slope or left == 0 or right == 0:
            continue
        if (left > 0) != (right > 0):
            candidates.append((i, abs(left - right)))

    changes: List[int] = []
    block: List[Tuple[int, float]] = []
    for candidate in candidates:
        if block and candidate[0] != block[-1][0] + 1:
            changes.append(max(block, key=lambda c: c[1])[0])
            block = []
        block.append(candidate)
    if block:
        changes.append(max(block, key=lambda c: c[1])[0])
    return changes
