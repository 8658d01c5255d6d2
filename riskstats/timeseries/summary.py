"""
One-call summary of a series for the predictive analytics service.
"""

from __future__ import annotations

from typing import Iterable

from riskstats.core.validation import as_values
from riskstats.stats import coefficient_of_variation, mean, standard_deviation

from .schema import TimeSeriesStats
from .seasonality import autocorrelation, detect_seasonality
from .trend import detect_trend


def describe_time_series(data: Iterable[float]) -> TimeSeriesStats:
    values = as_values(data)
    if not values:
        return TimeSeriesStats()

    season = detect_seasonality(values)
    return TimeSeriesStats(
        length=len(values),
        first=values[0],
        last=values[-1],
        min=min(values),
        max=max(values),
        mean=mean(values),
        std=standard_deviation(values),
        trend=detect_trend(values),
        volatility=coefficient_of_variation(values),
        autocorrelation1=autocorrelation(values, 1),
        seasonal_period=season.period,
    )
