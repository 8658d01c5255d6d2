"""
Contextual anomaly detection.

Each point is judged against its own neighbourhood, so a value that is
ordinary for the series as a whole can still be anomalous where it occurs
(for example a bump inside an otherwise flat stretch of a volatile series).
"""

from __future__ import annotations

from typing import Iterable, List

from riskstats.core.validation import as_values, require_non_negative, require_positive_int

from .baselines import neighbourhood_baseline
from .schema import ContextualAnomalyResult, OutlierDirection


def detect_contextual_anomalies(
    data: Iterable[float], window_size: int = 10, threshold: float = 2.5
) -> List[ContextualAnomalyResult]:
    """
    Flag points more than `threshold` local std away from their neighbourhood.

    Args:
        data: Series ordered by time
        window_size: Neighbours taken on each side of a point (the point excluded)
        threshold: Local z-score cut-off

    Returns:
        Results sorted by index, each with the expected local band
    """
    window_size = require_positive_int(window_size, "window_size")
    threshold = require_non_negative(threshold, "threshold")
    values = as_values(data)

    results: List[ContextualAnomalyResult] = []
    for i, value in enumerate(values):
        baseline = neighbourhood_baseline(values, i, window_size)
        if baseline is None:
            continue
        score = abs(value - baseline.mean) / baseline.std
        if score <= threshold:
            continue
        results.append(
            ContextualAnomalyResult(
                index=i,
                value=value,
                direction=OutlierDirection.HIGH if value > baseline.mean else OutlierDirection.LOW,
                score=score,
                method="contextual",
                threshold=threshold,
                expected_min=baseline.mean - threshold * baseline.std,
                expected_max=baseline.mean + threshold * baseline.std,
            )
        )
    return results
