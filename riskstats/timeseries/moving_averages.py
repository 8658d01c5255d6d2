"""
Moving averages over trailing windows.

All outputs are aligned to the trailing (most recent) index: element k of a
result corresponds to input index k + (n - len(result)).
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List

from riskstats.core.validation import as_values, require_positive_int
from riskstats.stats import mean

logger = logging.getLogger(__name__)


def sma(data: Iterable[float], window: int) -> List[float]:
    """
    Simple moving average.

    Produces n - window + 1 points; window >= n collapses to the overall mean.
    """
    window = require_positive_int(window, "window")
    values = as_values(data)
    n = len(values)
    if n == 0:
        return []
    if window >= n:
        return [mean(values)]
    if window == 1:
        return values

    return [
        math.fsum(values[i - window + 1 : i + 1]) / window
        for i in range(window - 1, n)
    ]


def wma(data: Iterable[float], window: int) -> List[float]:
    """
    Linearly weighted moving average; the newest point in a window has weight `window`.
    """
    window = require_positive_int(window, "window")
    values = as_values(data)
    n = len(values)
    if n == 0:
        return []
    if window > n:
        logger.debug("wma: window %d clamped to series length %d", window, n)
        window = n

    weight_sum = window * (window + 1) / 2.0
    result: List[float] = []
    for i in range(window - 1, n):
        start = i - window + 1
        weighted = math.fsum(values[start + j] * (j + 1) for j in range(window))
        result.append(weighted / weight_sum)
    return result


def ema(data: Iterable[float], window: int) -> List[float]:
    """
    Exponential moving average with alpha = 2 / (window + 1).

    The first value is seeded with the simple average of the first `window`
    points, so the output has n - window + 1 points.
    """
    window = require_positive_int(window, "window")
    values = as_values(data)
    n = len(values)
    if n == 0:
        return []
    if window > n:
        logger.debug("ema: window %d clamped to series length %d", window, n)
        window = n

    alpha = 2.0 / (window + 1)
    current = math.fsum(values[:window]) / window
    result = [current]
    for value in values[window:]:
        current = alpha * value + (1.0 - alpha) * current
        result.append(current)
    return result


def dema(data: Iterable[float], window: int) -> List[float]:
    """Double exponential moving average: 2 * EMA - EMA(EMA)."""
    ema1 = ema(data, window)
    if not ema1:
        return []
    ema2 = ema(ema1, window)
    offset = len(ema1) - len(ema2)
    return [2.0 * ema1[i + offset] - e2 for i, e2 in enumerate(ema2)]


def tema(data: Iterable[float], window: int) -> List[float]:
    """Triple exponential moving average: 3 * EMA - 3 * EMA(EMA) + EMA(EMA(EMA))."""
    ema1 = ema(data, window)
    if not ema1:
        return []
    ema2 = ema(ema1, window)
    ema3 = ema(ema2, window)
    offset1 = len(ema1) - len(ema3)
    offset2 = len(ema2) - len(ema3)
    return [
        3.0 * ema1[i + offset1] - 3.0 * ema2[i + offset2] + e3
        for i, e3 in enumerate(ema3)
    ]
