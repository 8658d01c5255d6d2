"""
Timeseries module: Smoothing, trend/seasonality detection and forecasting.

Builds on riskstats.stats for means, deviations and regression.
"""

from .forecasting import forecast_linear, forecast_ses
from .momentum import acceleration, momentum, roc, velocity
from .moving_averages import dema, ema, sma, tema, wma
from .schema import (
    ForecastResult,
    HPFilterResult,
    SeasonalityResult,
    TimeSeriesStats,
    TrendDirection,
    TrendResult,
)
from .seasonality import autocorrelation, autocorrelation_function, detect_seasonality
from .smoothing import hp_filter, savitzky_golay
from .summary import describe_time_series
from .transforms import cumprod, cumsum, percentage_difference, returns
from .trend import detect_trend, detect_trend_changes
from .volatility import average_absolute_change, rolling_cv, rolling_volatility

__all__ = [
    # Schema
    "TrendDirection",
    "TrendResult",
    "SeasonalityResult",
    "HPFilterResult",
    "ForecastResult",
    "TimeSeriesStats",

    # Moving averages
    "sma",
    "wma",
    "ema",
    "dema",
    "tema",

    # Rate of change
    "roc",
    "momentum",
    "velocity",
    "acceleration",

    # Trend
    "detect_trend",
    "detect_trend_changes",

    # Seasonality
    "autocorrelation",
    "autocorrelation_function",
    "detect_seasonality",

    # Volatility
    "rolling_volatility",
    "average_absolute_change",
    "rolling_cv",

    # Smoothing
    "hp_filter",
    "savitzky_golay",

    # Forecasting
    "forecast_linear",
    "forecast_ses",

    # Comparison
    "percentage_difference",
    "cumsum",
    "cumprod",
    "returns",

    # Summary
    "describe_time_series",
]
