"""
Ensemble outlier detection.

Runs a fixed panel of single-method detectors, merges their hits by index
and scores each merged point by agreement:

    confidence = agreeing methods / methods in panel

Default panel (medium sensitivity): zscore@2.0, modified_zscore@3.5,
iqr@1.5, mad@3.0, grubbs@0.05. Panel and presets live in config.ensemble.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from riskstats.core.config import ENSEMBLE_METHODS, DetectorThresholds, config
from riskstats.core.exceptions import InvalidArgumentError
from riskstats.core.validation import as_values, require_range

from .detectors import (
    detect_outliers_iqr,
    detect_outliers_mad,
    detect_outliers_modified_zscore,
    detect_outliers_zscore,
)
from .grubbs import detect_outliers_grubbs
from .isolation import detect_outliers_isolation
from .schema import EnsembleResult, OutlierResult
from .scoring import SeverityMapper

logger = logging.getLogger(__name__)

Detector = Callable[[List[float], DetectorThresholds], List[OutlierResult]]

_DETECTORS: Dict[str, Detector] = {
    "zscore": lambda values, t: detect_outliers_zscore(values, t.zscore),
    "modified_zscore": lambda values, t: detect_outliers_modified_zscore(values, t.modified_zscore),
    "iqr": lambda values, t: detect_outliers_iqr(values, t.iqr),
    "mad": lambda values, t: detect_outliers_mad(values, t.mad),
    "grubbs": lambda values, t: detect_outliers_grubbs(values, t.grubbs),
    "isolation": lambda values, t: detect_outliers_isolation(values, t.isolation),
}


def _resolve_panel(methods: Optional[Sequence[str]]) -> List[str]:
    panel = list(config.ensemble.methods if methods is None else methods)
    if not panel:
        raise InvalidArgumentError("Ensemble panel must contain at least one method")
    unknown = [m for m in panel if m not in ENSEMBLE_METHODS]
    if unknown:
        raise InvalidArgumentError(f"Unknown ensemble methods: {unknown}")
    if len(set(panel)) != len(panel):
        raise InvalidArgumentError(f"Duplicate ensemble methods: {panel}")
    return panel


def _resolve_thresholds(sensitivity: str) -> DetectorThresholds:
    presets = config.ensemble.presets
    if sensitivity not in presets:
        raise InvalidArgumentError(
            f"Unknown sensitivity {sensitivity!r}; expected one of {sorted(presets)}"
        )
    return presets[sensitivity]


def detect_outliers_ensemble(
    data: Iterable[float],
    sensitivity: str = "medium",
    methods: Optional[Sequence[str]] = None,
    min_confidence: Optional[float] = None,
) -> List[EnsembleResult]:
    """
    Detect outliers by voting across a panel of detectors.

    Args:
        data: Numeric sequence
        sensitivity: Threshold preset name ("low", "medium", "high")
        methods: Panel override (config.ensemble.methods if None)
        min_confidence: Drop results below this agreement (config default 0)

    Returns:
        One EnsembleResult per flagged index, sorted by index
    """
    panel = _resolve_panel(methods)
    thresholds = _resolve_thresholds(sensitivity)
    if min_confidence is None:
        min_confidence = config.ensemble.min_confidence
    min_confidence = require_range(min_confidence, "min_confidence", 0.0, 1.0)
    values = as_values(data)
    if not values:
        return []

    hits: Dict[int, List[OutlierResult]] = {}
    for method in panel:
        found = _DETECTORS[method](values, thresholds)
        logger.debug("ensemble: %s flagged %d points", method, len(found))
        for result in found:
            hits.setdefault(result.index, []).append(result)

    mapper = SeverityMapper(config.severity)
    results: List[EnsembleResult] = []
    for index in sorted(hits):
        agreeing = hits[index]
        confidence = len(agreeing) / len(panel)
        if confidence < min_confidence:
            continue
        first = agreeing[0]
        results.append(
            EnsembleResult(
                index=index,
                value=first.value,
                direction=first.direction,
                score=sum(r.score for r in agreeing) / len(agreeing),
                method="ensemble",
                threshold=min_confidence,
                confidence=confidence,
                methods=[r.method for r in agreeing],
                severity=mapper.confidence_severity(confidence),
            )
        )
    return results
