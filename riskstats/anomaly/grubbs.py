"""
Grubbs' test for outliers, single-shot and iterative.

The iterative form removes the most extreme point and re-tests the rest,
which recovers a second outlier masked by the first one's inflated std.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

from scipy import stats as scipy_stats

from riskstats.core.validation import as_values, require_non_negative_int, require_range

from .schema import OutlierDirection, OutlierResult

logger = logging.getLogger(__name__)

MIN_POINTS = 3


def grubbs_critical_value(n: int, significance: float) -> float:
    """
    Two-sided Grubbs critical value for sample size n.

    G = (n - 1) / sqrt(n) * sqrt(t^2 / (n - 2 + t^2)), with t the upper
    significance / (2n) quantile of Student's t on n - 2 degrees of freedom.
    """
    significance = require_range(
        significance, "significance", 0.0, 1.0, low_inclusive=False, high_inclusive=False
    )
    if n < MIN_POINTS:
        return math.inf
    t = float(scipy_stats.t.ppf(1.0 - significance / (2.0 * n), n - 2))
    return (n - 1) / math.sqrt(n) * math.sqrt(t * t / (n - 2 + t * t))


def _most_extreme(values: List[float]) -> Optional[Tuple[int, float, float]]:
    """Index, G statistic and mean of the most extreme point (None if std is 0)."""
    n = len(values)
    avg = math.fsum(values) / n
    if max(values) == min(values):
        return None
    std = math.sqrt(math.fsum((v - avg) ** 2 for v in values) / (n - 1))
    if std == 0:
        return None
    index = max(range(n), key=lambda i: abs(values[i] - avg))
    return index, abs(values[index] - avg) / std, avg


def grubbs_test(data: Iterable[float], significance: float = 0.05) -> Optional[OutlierResult]:
    """
    Test whether the most extreme point is a statistical outlier.

    Returns:
        OutlierResult for that point if G exceeds the critical value, else None
    """
    significance = require_range(
        significance, "significance", 0.0, 1.0, low_inclusive=False, high_inclusive=False
    )
    values = as_values(data)
    n = len(values)
    if n < MIN_POINTS:
        return None

    extreme = _most_extreme(values)
    if extreme is None:
        return None
    index, g, avg = extreme
    critical = grubbs_critical_value(n, significance)
    if g <= critical:
        return None

    value = values[index]
    return OutlierResult(
        index=index,
        value=value,
        direction=OutlierDirection.HIGH if value > avg else OutlierDirection.LOW,
        score=g,
        method="grubbs",
        threshold=critical,
    )


def detect_outliers_grubbs(
    data: Iterable[float],
    significance: float = 0.05,
    max_iterations: int = 10,
) -> List[OutlierResult]:
    """
    Iterative Grubbs' test.

    Repeatedly removes the most extreme point while it exceeds the critical
    value, stopping at the first non-significant round or after
    max_iterations removals. Indices refer to the original sequence.
    """
    significance = require_range(
        significance, "significance", 0.0, 1.0, low_inclusive=False, high_inclusive=False
    )
    max_iterations = require_non_negative_int(max_iterations, "max_iterations")
    values = as_values(data)
    positions = list(range(len(values)))
    remaining = list(values)
    results: List[OutlierResult] = []

    for _ in range(max_iterations):
        found = grubbs_test(remaining, significance)
        if found is None:
            break
        original = positions.pop(found.index)
        remaining.pop(found.index)
        results.append(found.model_copy(update={"index": original}))

    if results:
        logger.debug("grubbs: %d outliers removed iteratively", len(results))
    return sorted(results, key=lambda r: r.index)
