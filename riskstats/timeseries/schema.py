"""
Schema definitions for time-series analytics.

Results are immutable and fully populated; degenerate input (empty or
single-point series) maps to flat, zero-valued records.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TrendDirection(str, Enum):
    """Direction of a fitted linear trend."""

    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class TrendResult(BaseModel):
    """
    Linear trend of a series against its index.

    Fields:
    - direction: up/down, or flat when |slope| is below the epsilon
    - slope: OLS slope per index step
    - strength: R-squared of the fit in [0, 1]
    - confidence: strength discounted for short series
    """

    model_config = ConfigDict(frozen=True)

    direction: TrendDirection = TrendDirection.FLAT
    slope: float = 0.0
    strength: float = Field(0.0, ge=0.0, le=1.0)
    confidence: float = Field(0.0, ge=0.0, le=1.0)


class SeasonalityResult(BaseModel):
    """Detected seasonal period; period is None when has_season is False."""

    model_config = ConfigDict(frozen=True)

    has_season: bool = False
    period: Optional[int] = None
    strength: float = 0.0


class HPFilterResult(BaseModel):
    """Hodrick-Prescott decomposition: trend + cycle == input."""

    model_config = ConfigDict(frozen=True)

    trend: List[float] = Field(default_factory=list)
    cycle: List[float] = Field(default_factory=list)


class ForecastResult(BaseModel):
    """
    Point forecasts with prediction bounds.

    forecast, lower and upper always have the same length (the horizon).
    """

    model_config = ConfigDict(frozen=True)

    forecast: List[float] = Field(default_factory=list)
    lower: List[float] = Field(default_factory=list)
    upper: List[float] = Field(default_factory=list)
    method: str


class TimeSeriesStats(BaseModel):
    """
    Summary of a series for predictive analytics.

    Fields:
    - length/first/last/min/max/mean/std: basic shape
    - trend: linear trend result
    - volatility: coefficient of variation in percent
    - autocorrelation1: lag-1 autocorrelation
    - seasonal_period: detected period or None
    """

    model_config = ConfigDict(frozen=True)

    length: int = 0
    first: float = 0.0
    last: float = 0.0
    min: float = 0.0
    max: float = 0.0
    mean: float = 0.0
    std: float = 0.0
    trend: TrendResult = TrendResult()
    volatility: float = 0.0
    autocorrelation1: float = 0.0
    seasonal_period: Optional[int] = None
