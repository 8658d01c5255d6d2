"""
Statistics over two aligned sequences: covariance, correlation, regression.

Both inputs must have the same length; anything else raises
LengthMismatchError before any computation happens.
"""

from __future__ import annotations

import math
from typing import Iterable

from riskstats.core.validation import as_pair

from .descriptive import mean, standard_deviation
from .schema import RegressionResult


def covariance(x: Iterable[float], y: Iterable[float], sample: bool = False) -> float:
    xs, ys = as_pair(x, y)
    n = len(xs)
    if n == 0:
        return 0.0
    if sample and n == 1:
        return 0.0
    x_mean = mean(xs)
    y_mean = mean(ys)
    products = math.fsum((xi - x_mean) * (yi - y_mean) for xi, yi in zip(xs, ys))
    divisor = n - 1 if sample else n
    return products / divisor


def correlation(x: Iterable[float], y: Iterable[float]) -> float:
    """
    Pearson correlation coefficient in [-1, 1].

    Returns 0 when either sequence has zero variance.
    """
    xs, ys = as_pair(x, y)
    if not xs:
        return 0.0
    x_std = standard_deviation(xs)
    y_std = standard_deviation(ys)
    if x_std == 0 or y_std == 0:
        return 0.0
    r = covariance(xs, ys) / (x_std * y_std)
    return max(-1.0, min(1.0, r))


def linear_regression(x: Iterable[float], y: Iterable[float]) -> RegressionResult:
    """
    Ordinary least-squares fit of y against x.

    Fewer than two points yield a zero fit. R-squared is 0 when the total
    sum of squares is 0.
    """
    xs, ys = as_pair(x, y)
    n = len(xs)
    if n < 2:
        return RegressionResult()

    x_mean = mean(xs)
    y_mean = mean(ys)
    numerator = math.fsum((xi - x_mean) * (yi - y_mean) for xi, yi in zip(xs, ys))
    denominator = math.fsum((xi - x_mean) ** 2 for xi in xs)

    slope = 0.0 if denominator == 0 else numerator / denominator
    intercept = y_mean - slope * x_mean

    ss_res = math.fsum((yi - (slope * xi + intercept)) ** 2 for xi, yi in zip(xs, ys))
    ss_tot = math.fsum((yi - y_mean) ** 2 for yi in ys)
    r2 = 0.0 if ss_tot == 0 else max(0.0, min(1.0, 1.0 - ss_res / ss_tot))

    return RegressionResult(slope=slope, intercept=intercept, r2=r2)
