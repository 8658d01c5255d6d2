"""
Time-series-aware detectors.

These compare each point with a local rolling baseline instead of the
global distribution:
- rolling z-score anomalies
- spikes: transient single-point deviations that revert immediately
- level shifts: sustained step changes in the local mean

A perfectly flat baseline has no scale to measure deviation against, so
points compared with one are skipped rather than scored.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from riskstats.core.config import config
from riskstats.core.validation import as_values, require_non_negative, require_positive_int
from riskstats.stats import mean, variance

from .baselines import trailing_baseline
from .schema import OutlierDirection, OutlierResult


def _direction(value: float, center: float) -> OutlierDirection:
    return OutlierDirection.HIGH if value > center else OutlierDirection.LOW


def detect_time_series_anomalies(
    data: Iterable[float], window: int = 10, threshold: float = 3.0
) -> List[OutlierResult]:
    """Flag points deviating more than `threshold` std from the preceding `window` points."""
    window = require_positive_int(window, "window")
    threshold = require_non_negative(threshold, "threshold")
    values = as_values(data)

    results: List[OutlierResult] = []
    for i in range(window, len(values)):
        baseline = trailing_baseline(values, i, window, std_floor=0.0)
        if baseline.std == 0:
            continue
        score = abs(values[i] - baseline.mean) / baseline.std
        if score > threshold:
            results.append(
                OutlierResult(
                    index=i,
                    value=values[i],
                    direction=_direction(values[i], baseline.mean),
                    score=score,
                    method="rolling_zscore",
                    threshold=threshold,
                )
            )
    return results


def detect_spikes(
    data: Iterable[float], window: int = 5, threshold: float = 2.0
) -> List[OutlierResult]:
    """
    Flag transient spikes.

    A point is a spike when it deviates from its trailing baseline by more
    than `threshold` std and the next point falls back inside that band. The
    final point qualifies on deviation alone since its reversion is not yet
    observable.
    """
    window = require_positive_int(window, "window")
    threshold = require_non_negative(threshold, "threshold")
    values = as_values(data)
    n = len(values)

    results: List[OutlierResult] = []
    for i in range(window, n):
        baseline = trailing_baseline(values, i, window, std_floor=0.0)
        if baseline.std == 0:
            continue
        score = abs(values[i] - baseline.mean) / baseline.std
        if score <= threshold:
            continue
        if i + 1 < n and abs(values[i + 1] - baseline.mean) / baseline.std > threshold:
            continue
        results.append(
            OutlierResult(
                index=i,
                value=values[i],
                direction=_direction(values[i], baseline.mean),
                score=score,
                method="spike",
                threshold=threshold,
            )
        )
    return results


def _run_length(values: List[float], start: int, midpoint: float, upward: bool) -> int:
    run = 0
    for value in values[start:]:
        if (value > midpoint) if upward else (value < midpoint):
            run += 1
        else:
            break
    return run


def detect_level_shifts(
    data: Iterable[float],
    window: int = 10,
    threshold: float = 2.0,
    min_run: Optional[int] = None,
) -> List[OutlierResult]:
    """
    Flag sustained step changes in the local mean.

    Compares the `window` points before i with the `window` points from i
    on, scaled by the pooled std. The change must persist for `min_run`
    consecutive points past the midpoint of the two means, which separates
    a regime change from a transient spike. Each contiguous block of
    candidates reports only its strongest index.
    """
    window = require_positive_int(window, "window")
    threshold = require_non_negative(threshold, "threshold")
    if min_run is None:
        min_run = config.detection.level_shift_min_run
    min_run = require_positive_int(min_run, "min_run")
    values = as_values(data)
    n = len(values)

    candidates: List[OutlierResult] = []
    for i in range(window, n - window + 1):
        before = values[i - window : i]
        after = values[i : i + window]
        before_mean = mean(before)
        after_mean = mean(after)
        pooled = math.sqrt((variance(before) + variance(after)) / 2.0)
        if pooled == 0:
            continue
        shift = abs(after_mean - before_mean) / pooled
        if shift <= threshold:
            continue
        upward = after_mean > before_mean
        midpoint = (before_mean + after_mean) / 2.0
        if _run_length(values, i, midpoint, upward) < min_run:
            continue
        candidates.append(
            OutlierResult(
                index=i,
                value=values[i],
                direction=OutlierDirection.HIGH if upward else OutlierDirection.LOW,
                score=shift,
                method="level_shift",
                threshold=threshold,
            )
        )

    results: List[OutlierResult] = []
    block: List[OutlierResult] = []
    for candidate in candidates:
        if block and (candidate.index != block[-1].index + 1 or candidate.direction != block[-1].direction):
            results.append(max(block, key=lambda r: r.score))
            block = []
        block.append(candidate)
    if block:
        results.append(max(block, key=lambda r: r.score))
    return results
