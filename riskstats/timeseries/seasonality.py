"""
Seasonality detection from the autocorrelation function.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from riskstats.core.config import config
from riskstats.core.validation import as_values, require_non_negative_int, require_range
from riskstats.stats import mean

from .schema import SeasonalityResult

logger = logging.getLogger(__name__)


def autocorrelation(data: Iterable[float], lag: int) -> float:
    """
    Normalized autocorrelation coefficient at `lag`.

    Out-of-range lags and zero-variance series yield 0.
    """
    lag = require_non_negative_int(lag, "lag")
    values = as_values(data)
    n = len(values)
    if n == 0 or lag >= n:
        return 0.0

    avg = mean(values)
    denominator = math.fsum((v - avg) ** 2 for v in values)
    if denominator == 0:
        return 0.0
    numerator = math.fsum(
        (values[i] - avg) * (values[i + lag] - avg) for i in range(n - lag)
    )
    return numerator / denominator


def autocorrelation_function(
    data: Iterable[float], max_lag: Optional[int] = None
) -> List[float]:
    """
    Autocorrelation at lags 1..max_lag (default n // 2).

    Element k of the result is the coefficient at lag k + 1.
    """
    values = as_values(data)
    if max_lag is None:
        max_lag = len(values) // 2
    max_lag = require_non_negative_int(max_lag, "max_lag")
    return [autocorrelation(values, lag) for lag in range(1, max_lag + 1)]


def detect_seasonality(
    data: Iterable[float],
    threshold: Optional[float] = None,
    max_lag: Optional[int] = None,
) -> SeasonalityResult:
    """
    Detect a seasonal period as the strongest significant ACF peak.

    Lag 1 is skipped because smooth or trending series always correlate with
    their immediate neighbour. A lag qualifies when it is a local maximum of
    the ACF and its coefficient reaches the threshold.
    """
    if threshold is None:
        threshold = config.seasonality.threshold
    threshold = require_range(threshold, "threshold", 0.0, 1.0)

    values = as_values(data)
    acf = autocorrelation_function(values, max_lag)
    if len(acf) < 2:
        return SeasonalityResult()

    best_lag: Optional[int] = None
    best_corr = 0.0
    for k in range(1, len(acf)):
        corr = acf[k]
        if corr < threshold:
            continue
        left_ok = corr >= acf[k - 1]
        right_ok = k == len(acf) - 1 or corr >= acf[k + 1]
        if left_ok and right_ok and corr > best_corr:
            best_corr = corr
            best_lag = k + 1

    if best_lag is None:
        return SeasonalityResult()

    logger.debug("detect_seasonality: period %d (acf=%.3f)", best_lag, best_corr)
    return SeasonalityResult(has_season=True, period=best_lag, strength=best_corr)
