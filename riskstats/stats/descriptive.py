"""
Descriptive statistics over a single numeric sequence.

Conventions:
- Population divisor unless sample=True is requested.
- Empty input yields 0 (or an empty list) instead of raising.
- Sorting happens on private copies; the caller's sequence is never touched.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Iterable, List

from riskstats.core.validation import as_values, require_non_negative, require_range

from .schema import DescriptiveStats, Quartiles

logger = logging.getLogger(__name__)


def total(values: Iterable[float]) -> float:
    """Sum of the sequence (0 for empty input)."""
    data = as_values(values)
    return math.fsum(data)


sum_values = total


def mean(values: Iterable[float]) -> float:
    data = as_values(values)
    if not data:
        return 0.0
    return math.fsum(data) / len(data)


def median(values: Iterable[float]) -> float:
    """
    Middle value of the sorted sequence.

    Even-length input averages the two middle elements.
    """
    data = sorted(as_values(values))
    n = len(data)
    if n == 0:
        return 0.0
    mid = n // 2
    if n % 2 == 0:
        return (data[mid - 1] + data[mid]) / 2.0
    return data[mid]


def mode(values: Iterable[float]) -> List[float]:
    """
    All values tied for the highest frequency, sorted ascending.

    Multi-modal input is a normal outcome, not an error.
    """
    data = as_values(values)
    if not data:
        return []
    counts = Counter(data)
    top = max(counts.values())
    return sorted(value for value, count in counts.items() if count == top)


def variance(values: Iterable[float], sample: bool = False) -> float:
    """
    Population (divisor n) or sample (divisor n - 1) variance.

    Sequences with fewer than two points have zero variance.
    """
    data = as_values(values)
    n = len(data)
    if n <= 1 or max(data) == min(data):
        return 0.0
    avg = math.fsum(data) / n
    squared = math.fsum((v - avg) ** 2 for v in data)
    divisor = n - 1 if sample else n
    return squared / divisor


def standard_deviation(values: Iterable[float], sample: bool = False) -> float:
    return math.sqrt(variance(values, sample=sample))


std_dev = standard_deviation


def value_range(values: Iterable[float]) -> float:
    """max - min (0 for empty input)."""
    data = as_values(values)
    if not data:
        return 0.0
    return max(data) - min(data)


def percentile(values: Iterable[float], p: float) -> float:
    """
    Percentile by linear interpolation between order statistics (R-7).

    Args:
        values: Numeric sequence
        p: Percentile rank in [0, 100]

    Returns:
        Interpolated value, or 0 for empty input

    Raises:
        InvalidArgumentError: If p is outside [0, 100]
    """
    p = require_range(p, "percentile rank", 0.0, 100.0)
    data = sorted(as_values(values))
    if not data:
        return 0.0

    index = (p / 100.0) * (len(data) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return data[lower]
    weight = index - lower
    return data[lower] * (1.0 - weight) + data[upper] * weight


def quartiles(values: Iterable[float]) -> Quartiles:
    data = as_values(values)
    return Quartiles(
        q1=percentile(data, 25),
        q2=percentile(data, 50),
        q3=percentile(data, 75),
    )


def iqr(values: Iterable[float]) -> float:
    q = quartiles(values)
    return q.q3 - q.q1


def z_score(value: float, values: Iterable[float]) -> float:
    """Standard score of value against a population (0 when std is 0)."""
    data = as_values(values)
    return z_score_from_params(value, mean(data), standard_deviation(data))


def z_score_from_params(value: float, avg: float, std: float) -> float:
    """Standard score from a precomputed mean and standard deviation."""
    value, avg = as_values([value, avg], "value/avg")
    std = require_non_negative(std, "std")
    if std == 0:
        return 0.0
    return (value - avg) / std


def z_scores(values: Iterable[float]) -> List[float]:
    data = as_values(values)
    avg = mean(data)
    std = standard_deviation(data)
    if std == 0:
        return [0.0 for _ in data]
    return [(v - avg) / std for v in data]


def coefficient_of_variation(values: Iterable[float]) -> float:
    """Relative variability std / |mean| in percent (0 when the mean is 0)."""
    data = as_values(values)
    avg = mean(data)
    if avg == 0:
        return 0.0
    return standard_deviation(data) / abs(avg) * 100.0


def skewness(values: Iterable[float]) -> float:
    """
    Adjusted Fisher-Pearson skewness.

    Positive means the right tail is longer. Needs at least 3 points.
    """
    data = as_values(values)
    n = len(data)
    if n < 3:
        return 0.0
    avg = mean(data)
    std = standard_deviation(data)
    if std == 0:
        return 0.0
    cubed = math.fsum(((v - avg) / std) ** 3 for v in data)
    return n / ((n - 1) * (n - 2)) * cubed


def kurtosis(values: Iterable[float]) -> float:
    """
    Excess kurtosis (a normal distribution yields ~0).

    Needs at least 4 points.
    """
    data = as_values(values)
    n = len(data)
    if n < 4:
        return 0.0
    avg = mean(data)
    std = standard_deviation(data)
    if std == 0:
        return 0.0
    fourth = math.fsum(((v - avg) / std) ** 4 for v in data) / n
    return fourth - 3.0


def normalize(values: Iterable[float]) -> List[float]:
    """
    Min-max scaling to [0, 1].

    A constant sequence maps every element to the 0.5 midpoint.
    """
    data = as_values(values)
    if not data:
        return []
    low = min(data)
    spread = max(data) - low
    if spread == 0:
        logger.debug("normalize: zero range over %d points, using midpoint", len(data))
        return [0.5 for _ in data]
    return [(v - low) / spread for v in data]


def standardize(values: Iterable[float]) -> List[float]:
    """Z-score scaling to mean 0 and population std 1 (all zeros when std is 0)."""
    return z_scores(values)


def describe(values: Iterable[float]) -> DescriptiveStats:
    """
    Calculate all descriptive statistics for a sequence.

    Returns an all-zero record for empty input.
    """
    data = as_values(values)
    if not data:
        return DescriptiveStats()

    q = quartiles(data)
    return DescriptiveStats(
        count=len(data),
        sum=total(data),
        mean=mean(data),
        median=median(data),
        mode=mode(data),
        min=min(data),
        max=max(data),
        range=value_range(data),
        variance=variance(data),
        std_dev=standard_deviation(data),
        cv=coefficient_of_variation(data),
        q1=q.q1,
        q2=q.q2,
        q3=q.q3,
        iqr=q.q3 - q.q1,
        skewness=skewness(data),
        kurtosis=kurtosis(data),
    )
