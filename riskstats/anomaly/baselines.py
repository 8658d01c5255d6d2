"""
Local baseline estimation for the time-series-aware detectors.

Baselines are computed from neighbouring points rather than the global
distribution. By default the std is floored at config.detection.std_floor
so a flat neighbourhood still yields a finite deviation score; pass
std_floor=0.0 to get the raw std.
"""

from __future__ import annotations

from math import sqrt
from typing import List, Optional

from riskstats.core.config import config

from .schema import BaselineStats


def _stats(values: List[float], std_floor: float, method: str) -> BaselineStats:
    mean = sum(values) / len(values)
    if max(values) == min(values):
        variance = 0.0
    else:
        variance = sum((v - mean) ** 2 for v in values) / len(values)
    std = max(sqrt(variance), std_floor)
    return BaselineStats(mean=mean, std=std, count=len(values), method=method)


def trailing_baseline(
    values: List[float],
    index: int,
    window: int,
    std_floor: Optional[float] = None,
) -> Optional[BaselineStats]:
    """
    Mean/std of the `window` points strictly before `index`.

    Warm-up: returns None until a full window precedes the index.
    """
    if index < window or window <= 0:
        return None
    floor = config.detection.std_floor if std_floor is None else std_floor
    return _stats(values[index - window : index], floor, "trailing")


def neighbourhood_baseline(
    values: List[float],
    index: int,
    window: int,
    std_floor: Optional[float] = None,
) -> Optional[BaselineStats]:
    """
    Mean/std of up to `window` points on each side of `index`, excluding it.

    Returns None when fewer than two neighbours exist.
    """
    neighbours = values[max(0, index - window) : index] + values[index + 1 : index + 1 + window]
    if len(neighbours) < 2:
        return None
    floor = config.detection.std_floor if std_floor is None else std_floor
    return _stats(neighbours, floor, "neighbourhood")
