"""
riskstats: Statistical analytics for risk, control and transaction metrics.

Subpackages:
- core: configuration, logging, validation and exceptions
- stats: descriptive and bivariate statistics
- timeseries: smoothing, trend, seasonality, volatility and forecasting
- anomaly: outlier detection, ensemble voting and summaries
"""

from .anomaly import detect_outliers_ensemble, summarize_anomalies
from .core import config, setup_logging
from .stats import describe
from .timeseries import describe_time_series, detect_trend

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "config",
    "setup_logging",
    "describe",
    "describe_time_series",
    "detect_trend",
    "detect_outliers_ensemble",
    "summarize_anomalies",
]
