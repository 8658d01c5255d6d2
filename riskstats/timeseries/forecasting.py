"""
Simple forecasting: linear trend extrapolation and simple exponential smoothing.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from riskstats.core.config import config
from riskstats.core.validation import as_values, require_non_negative_int, require_range
from riskstats.stats import linear_regression, standard_deviation

from .schema import ForecastResult


def forecast_linear(data: Iterable[float], horizon: int) -> ForecastResult:
    """
    Extrapolate the OLS fit `horizon` steps past the last index.

    Bounds are forecast +/- z * residual standard error (constant width).
    A perfectly linear or flat series gives a zero-width interval.
    """
    horizon = require_non_negative_int(horizon, "horizon")
    values = as_values(data)
    n = len(values)
    if n < 2:
        return ForecastResult(method="linear")

    fit = linear_regression(range(n), values)
    residuals = [v - fit.predict(i) for i, v in enumerate(values)]
    width = config.forecast.interval_z * standard_deviation(residuals)

    forecast = [fit.predict(n - 1 + step) for step in range(1, horizon + 1)]
    return ForecastResult(
        forecast=forecast,
        lower=[f - width for f in forecast],
        upper=[f + width for f in forecast],
        method="linear",
    )


def forecast_ses(
    data: Iterable[float], horizon: int, alpha: Optional[float] = None
) -> ForecastResult:
    """
    Simple exponential smoothing forecast.

    SES has no trend component, so every step repeats the last smoothed
    level. The interval widens with sqrt(step) around the one-step RMSE.
    """
    horizon = require_non_negative_int(horizon, "horizon")
    if alpha is None:
        alpha = config.forecast.ses_alpha
    alpha = require_range(alpha, "alpha", 0.0, 1.0, low_inclusive=False)

    values = as_values(data)
    if not values:
        return ForecastResult(method="ses")

    level = values[0]
    errors: List[float] = []
    for value in values[1:]:
        errors.append(value - level)
        level = alpha * value + (1.0 - alpha) * level

    rmse = math.sqrt(math.fsum(e * e for e in errors) / len(errors)) if errors else 0.0
    z = config.forecast.interval_z

    forecast: List[float] = []
    lower: List[float] = []
    upper: List[float] = []
    for step in range(1, horizon + 1):
        interval = z * rmse * math.sqrt(step)
        forecast.append(level)
        lower.append(level - interval)
        upper.append(level + interval)

    return ForecastResult(forecast=forecast, lower=lower, upper=upper, method="ses")
