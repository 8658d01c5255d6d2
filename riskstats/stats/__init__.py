"""
Stats module: Core descriptive and bivariate statistics.

Leaf module with no dependency on time-series or anomaly code.
"""

from .bivariate import correlation, covariance, linear_regression
from .descriptive import (
    coefficient_of_variation,
    describe,
    iqr,
    kurtosis,
    mean,
    median,
    mode,
    normalize,
    percentile,
    quartiles,
    skewness,
    standard_deviation,
    standardize,
    std_dev,
    sum_values,
    total,
    value_range,
    variance,
    z_score,
    z_score_from_params,
    z_scores,
)
from .schema import DescriptiveStats, Quartiles, RegressionResult

__all__ = [
    # Schema
    "DescriptiveStats",
    "Quartiles",
    "RegressionResult",

    # Descriptive
    "total",
    "sum_values",
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "std_dev",
    "value_range",
    "percentile",
    "quartiles",
    "iqr",
    "z_score",
    "z_score_from_params",
    "z_scores",
    "coefficient_of_variation",
    "skewness",
    "kurtosis",
    "normalize",
    "standardize",
    "describe",

    # Bivariate
    "covariance",
    "correlation",
    "linear_regression",
]
