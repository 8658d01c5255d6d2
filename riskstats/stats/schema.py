"""
Schema definitions for core statistics results.

Every result is an immutable value object computed from a single call.
Degenerate input produces zero-valued fields rather than a partial record.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Quartiles(BaseModel):
    """First, second (median) and third quartile of a sequence."""

    model_config = ConfigDict(frozen=True)

    q1: float = 0.0
    q2: float = 0.0
    q3: float = 0.0


class RegressionResult(BaseModel):
    """
    Ordinary least-squares fit y = slope * x + intercept.

    Fields:
    - slope: change in y per unit x
    - intercept: fitted y at x = 0
    - r2: coefficient of determination, 0 when y has no variance
    """

    model_config = ConfigDict(frozen=True)

    slope: float = 0.0
    intercept: float = 0.0
    r2: float = 0.0

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


class DescriptiveStats(BaseModel):
    """
    Summary statistics for one numeric sequence.

    Fields:
    - count/sum/mean/median: location
    - mode: every value tied for the highest frequency, ascending
    - min/max/range/variance/std_dev: spread (population divisor)
    - cv: coefficient of variation in percent
    - q1/q2/q3/iqr: R-7 quartiles and interquartile range
    - skewness/kurtosis: shape (kurtosis is excess kurtosis)

    All fields are zero (mode empty) for an empty sequence.
    """

    model_config = ConfigDict(frozen=True)

    count: int = 0
    sum: float = 0.0
    mean: float = 0.0
    median: float = 0.0
    mode: List[float] = Field(default_factory=list)
    min: float = 0.0
    max: float = 0.0
    range: float = 0.0
    variance: float = 0.0
    std_dev: float = 0.0
    cv: float = 0.0
    q1: float = 0.0
    q2: float = 0.0
    q3: float = 0.0
    iqr: float = 0.0
    skewness: float = 0.0
    kurtosis: float = 0.0
