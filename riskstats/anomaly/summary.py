"""
Anomaly summary: a read-only aggregation over one ensemble run.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional, Sequence

from riskstats.core.validation import as_values

from .ensemble import detect_outliers_ensemble
from .schema import AnomalySummary, MethodCount, OutlierDirection
from .scoring import overall_severity


def summarize_anomalies(
    data: Iterable[float],
    sensitivity: str = "medium",
    methods: Optional[Sequence[str]] = None,
) -> AnomalySummary:
    values = as_values(data)
    results = detect_outliers_ensemble(values, sensitivity=sensitivity, methods=methods)
    if not values:
        return AnomalySummary()

    counts = Counter(method for r in results for method in r.methods)
    method_counts = [
        MethodCount(method=method, count=count)
        for method, count in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    ]
    most_anomalous = (
        max(results, key=lambda r: (r.confidence, r.score)) if results else None
    )
    high = sum(1 for r in results if r.direction == OutlierDirection.HIGH)
    rate = len(results) / len(values)

    return AnomalySummary(
        total_points=len(values),
        outlier_count=len(results),
        outlier_rate=rate,
        outlier_percentage=rate * 100.0,
        method_counts=method_counts,
        most_anomalous=most_anomalous,
        high_count=high,
        low_count=len(results) - high,
        severity=overall_severity(*(r.severity for r in results)),
    )
