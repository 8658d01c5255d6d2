"""
Severity mapping for ensemble anomalies.

Maps method agreement (confidence) to severity levels with configurable
cut-offs.
"""

from __future__ import annotations

from dataclasses import dataclass

from riskstats.core.config import SeverityConfig

from .schema import AnomalySeverity

_ORDER = [
    AnomalySeverity.NONE,
    AnomalySeverity.LOW,
    AnomalySeverity.MEDIUM,
    AnomalySeverity.HIGH,
    AnomalySeverity.CRITICAL,
]


@dataclass
class SeverityMapper:
    """
    Maps ensemble confidence to severity levels.
    """

    thresholds: SeverityConfig

    def confidence_severity(self, confidence: float) -> AnomalySeverity:
        if confidence >= self.thresholds.critical:
            return AnomalySeverity.CRITICAL
        if confidence >= self.thresholds.high:
            return AnomalySeverity.HIGH
        if confidence >= self.thresholds.medium:
            return AnomalySeverity.MEDIUM
        if confidence >= self.thresholds.low:
            return AnomalySeverity.LOW
        return AnomalySeverity.NONE


def overall_severity(*severities: AnomalySeverity) -> AnomalySeverity:
    """
    Return the highest severity among inputs (NONE when there are none).
    """
    if not severities:
        return AnomalySeverity.NONE
    highest_index = max(_ORDER.index(s) for s in severities)
    return _ORDER[highest_index]
