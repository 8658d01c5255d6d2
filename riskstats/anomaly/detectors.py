"""
Single-method detectors against the global distribution.

Implements explainable methods:
- Z-score detection (mean/std)
- Modified z-score and MAD detection (median/MAD, robust to the outliers themselves)
- IQR detection (Tukey's fences)

Every detector returns results sorted by index ascending.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from riskstats.core.validation import as_values, require_non_negative
from riskstats.stats import mean, median, percentile, standard_deviation

from .schema import OutlierDirection, OutlierResult

logger = logging.getLogger(__name__)

# Consistency constant: MAD * 1.4826 estimates sigma for normal data.
MODIFIED_Z_CONSTANT = 0.6745


def _direction(value: float, center: float) -> OutlierDirection:
    return OutlierDirection.HIGH if value > center else OutlierDirection.LOW


def mad(values: Iterable[float]) -> float:
    """Median absolute deviation: median of |x - median(values)|."""
    data = as_values(values)
    if not data:
        return 0.0
    center = median(data)
    return median([abs(v - center) for v in data])


def detect_outliers_zscore(data: Iterable[float], threshold: float) -> List[OutlierResult]:
    """
    Flag points with |z| > threshold using the population mean and std.

    The threshold is the caller's sensitivity choice (commonly 2 or 3).
    Zero-variance input flags nothing.
    """
    threshold = require_non_negative(threshold, "threshold")
    values = as_values(data)
    if not values:
        return []

    avg = mean(values)
    std = standard_deviation(values)
    if std == 0:
        return []

    results: List[OutlierResult] = []
    for i, value in enumerate(values):
        z = (value - avg) / std
        if abs(z) > threshold:
            results.append(
                OutlierResult(
                    index=i,
                    value=value,
                    direction=_direction(value, avg),
                    score=abs(z),
                    method="zscore",
                    threshold=threshold,
                )
            )
    return results


def detect_outliers_modified_zscore(
    data: Iterable[float], threshold: float = 3.5
) -> List[OutlierResult]:
    """
    Flag points with |0.6745 * (x - median) / MAD| > threshold.

    A zero MAD (more than half the points identical) flags nothing.
    """
    threshold = require_non_negative(threshold, "threshold")
    values = as_values(data)
    if not values:
        return []

    center = median(values)
    spread = mad(values)
    if spread == 0:
        logger.debug("modified_zscore: zero MAD over %d points, nothing flagged", len(values))
        return []

    results: List[OutlierResult] = []
    for i, value in enumerate(values):
        modified_z = MODIFIED_Z_CONSTANT * (value - center) / spread
        if abs(modified_z) > threshold:
            results.append(
                OutlierResult(
                    index=i,
                    value=value,
                    direction=_direction(value, center),
                    score=abs(modified_z),
                    method="modified_zscore",
                    threshold=threshold,
                )
            )
    return results


def detect_outliers_mad(data: Iterable[float], threshold: float = 3.0) -> List[OutlierResult]:
    """Flag points whose |x - median| exceeds threshold MADs."""
    threshold = require_non_negative(threshold, "threshold")
    values = as_values(data)
    if not values:
        return []

    center = median(values)
    spread = mad(values)
    if spread == 0:
        logger.debug("mad: zero MAD over %d points, nothing flagged", len(values))
        return []

    results: List[OutlierResult] = []
    for i, value in enumerate(values):
        deviation = abs(value - center) / spread
        if deviation > threshold:
            results.append(
                OutlierResult(
                    index=i,
                    value=value,
                    direction=_direction(value, center),
                    score=deviation,
                    method="mad",
                    threshold=threshold,
                )
            )
    return results


def detect_outliers_iqr(data: Iterable[float], k: float = 1.5) -> List[OutlierResult]:
    """
    Flag points outside [Q1 - k * IQR, Q3 + k * IQR].

    k=1.5 marks outliers, k=3 extreme outliers. Raising k never flags more
    points. Score is the distance past the fence in IQR units (raw distance
    when the IQR is 0).
    """
    k = require_non_negative(k, "k")
    values = as_values(data)
    if not values:
        return []

    q1 = percentile(values, 25)
    q3 = percentile(values, 75)
    spread = q3 - q1
    lower_fence = q1 - k * spread
    upper_fence = q3 + k * spread

    results: List[OutlierResult] = []
    for i, value in enumerate(values):
        if value < lower_fence:
            distance, direction, fence = lower_fence - value, OutlierDirection.LOW, lower_fence
        elif value > upper_fence:
            distance, direction, fence = value - upper_fence, OutlierDirection.HIGH, upper_fence
        else:
            continue
        results.append(
            OutlierResult(
                index=i,
                value=value,
                direction=direction,
                score=distance / spread if spread > 0 else distance,
                method="iqr",
                threshold=fence,
            )
        )
    return results
