"""
Stateless comparison transforms: benchmark differences, cumulative sums and
products, and period-over-period returns.
"""

from __future__ import annotations

import math
from typing import Iterable, List

from riskstats.core.exceptions import InvalidArgumentError
from riskstats.core.validation import as_values

from .momentum import roc


def percentage_difference(actual: Iterable[float], benchmark: Iterable[float]) -> List[float]:
    """
    Element-wise percent difference of actual versus benchmark.

    Compares over the shorter of the two lengths; a zero benchmark yields 0.
    """
    xs = as_values(actual, "actual")
    bs = as_values(benchmark, "benchmark")
    result: List[float] = []
    for a, b in zip(xs, bs):
        if b == 0:
            result.append(0.0)
        else:
            result.append((a - b) / abs(b) * 100.0)
    return result


def cumsum(data: Iterable[float]) -> List[float]:
    result: List[float] = []
    running = 0.0
    for value in as_values(data):
        running += value
        result.append(running)
    return result


def cumprod(data: Iterable[float]) -> List[float]:
    result: List[float] = []
    running = 1.0
    for value in as_values(data):
        running *= value
        result.append(running)
    return result


def returns(data: Iterable[float], kind: str = "simple") -> List[float]:
    """
    Period-over-period returns in percent.

    Args:
        data: Price or metric series
        kind: "simple" (identical to roc(data, 1)) or "log" (100 * ln(cur / prior))

    Returns:
        n - 1 returns; a zero prior or a non-positive ratio yields 0
    """
    if kind == "simple":
        return roc(data, 1)
    if kind != "log":
        raise InvalidArgumentError(f"Unknown return kind: {kind!r}")

    values = as_values(data)
    result: List[float] = []
    for i in range(1, len(values)):
        prior = values[i - 1]
        ratio = values[i] / prior if prior != 0 else 0.0
        result.append(math.log(ratio) * 100.0 if ratio > 0 else 0.0)
    return result
