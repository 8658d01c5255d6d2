"""
Schema definitions for outlier and anomaly detection.

All outputs are deterministic and explainable. Each result references its
position in the input, the observed value, how extreme it was, and the
threshold it crossed.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnomalySeverity(str, Enum):
    """Severity levels for anomalies."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class OutlierDirection(str, Enum):
    """Side of the detector's center the value fell on."""

    HIGH = "high"
    LOW = "low"


class BaselineStats(BaseModel):
    """
    Local baseline statistics around a point.

    Fields:
    - mean: central tendency
    - std: dispersion (>= std_floor)
    - count: number of points used
    - method: baseline strategy used
    """

    model_config = ConfigDict(frozen=True)

    mean: float
    std: float
    count: int
    method: str


class OutlierResult(BaseModel):
    """
    A single flagged point.

    Fields:
    - index: 0-based position in the input sequence
    - value: observed value
    - direction: "high" or "low" relative to the detector's center
    - score: how extreme the point is (higher = more anomalous)
    - method: name of the detector
    - threshold: cut-off the score (or value, for IQR fences) crossed
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    value: float
    direction: OutlierDirection
    score: float = Field(ge=0.0)
    method: str
    threshold: float


class EnsembleResult(OutlierResult):
    """
    Outlier agreed on by one or more detectors of the ensemble panel.

    Fields:
    - confidence: agreeing methods / panel size, in [0, 1]
    - methods: agreeing detector names, in panel order
    - severity: severity mapped from confidence
    """

    confidence: float = Field(ge=0.0, le=1.0)
    methods: List[str] = Field(default_factory=list)
    severity: AnomalySeverity = AnomalySeverity.NONE


class ContextualAnomalyResult(OutlierResult):
    """Point outside the band expected from its local neighbourhood."""

    expected_min: float
    expected_max: float


class MethodCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str
    count: int = Field(ge=0)


class AnomalySummary(BaseModel):
    """
    Read-only aggregation of an ensemble run.

    Fields:
    - total_points/outlier_count: sizes
    - outlier_rate: outlier_count / total_points in [0, 1]
    - outlier_percentage: the same rate in percent
    - method_counts: how many flagged points each method agreed on
    - most_anomalous: highest-confidence result (ties broken by score)
    - high_count/low_count: direction distribution
    - severity: highest severity among results
    """

    model_config = ConfigDict(frozen=True)

    total_points: int = Field(0, ge=0)
    outlier_count: int = Field(0, ge=0)
    outlier_rate: float = Field(0.0, ge=0.0, le=1.0)
    outlier_percentage: float = Field(0.0, ge=0.0, le=100.0)
    method_counts: List[MethodCount] = Field(default_factory=list)
    most_anomalous: Optional[EnsembleResult] = None
    high_count: int = Field(0, ge=0)
    low_count: int = Field(0, ge=0)
    severity: AnomalySeverity = AnomalySeverity.NONE
