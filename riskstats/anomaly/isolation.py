"""
Isolation-forest scoring.

Points that random axis splits separate after few cuts are anomalous. The
forest runs with a fixed random_state, so scores are reproducible. Scores
are the paper's s(x, n) = 2^(-E[h(x)] / c(n)) (sklearn's -score_samples):
about 0.5 for ordinary points and close to 1 for isolated ones.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np
from sklearn.ensemble import IsolationForest

from riskstats.core.config import config
from riskstats.core.validation import as_values, require_range
from riskstats.stats import mean

from .schema import OutlierDirection, OutlierResult


def _scaled(values: List[float], low: float, high: float) -> np.ndarray:
    # Min-max scaling keeps split geometry and avoids float32 precision loss in the trees
    return ((np.asarray(values, dtype=float) - low) / (high - low)).reshape(-1, 1)


def _fit_forest(values: List[float]) -> IsolationForest:
    forest = IsolationForest(
        n_estimators=config.detection.isolation_n_estimators,
        random_state=config.detection.isolation_random_state,
    )
    forest.fit(_scaled(values, min(values), max(values)))
    return forest


def calculate_isolation_score(value: float, data: Iterable[float]) -> float:
    """
    Isolation score of `value` against a forest fitted on `data`, in [0, 1].

    Higher means more anomalous. Fewer than two points or a zero-range
    population score 0.
    """
    (value,) = as_values([value], "value")
    values = as_values(data)
    if len(values) < 2 or max(values) == min(values):
        return 0.0

    forest = _fit_forest(values)
    point = _scaled([value], min(values), max(values))
    return float(-forest.score_samples(point)[0])


def detect_outliers_isolation(
    data: Iterable[float], threshold: Optional[float] = None
) -> List[OutlierResult]:
    """Flag points whose isolation score exceeds `threshold` (0..1)."""
    if threshold is None:
        threshold = config.detection.isolation_threshold
    threshold = require_range(threshold, "threshold", 0.0, 1.0)
    values = as_values(data)
    if len(values) < 2 or max(values) == min(values):
        return []

    forest = _fit_forest(values)
    scores = -forest.score_samples(_scaled(values, min(values), max(values)))
    avg = mean(values)

    results: List[OutlierResult] = []
    for i, (value, score) in enumerate(zip(values, scores)):
        if score > threshold:
            results.append(
                OutlierResult(
                    index=i,
                    value=value,
                    direction=OutlierDirection.HIGH if value > avg else OutlierDirection.LOW,
                    score=float(score),
                    method="isolation",
                    threshold=threshold,
                )
            )
    return results
