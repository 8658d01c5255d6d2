"""
Anomaly module: Outlier detection for risk, control and transaction series.

Implements global detectors, time-series-aware detectors, isolation
scoring, the voting ensemble, contextual detection and summaries.
"""

from .contextual import detect_contextual_anomalies
from .detectors import (
    detect_outliers_iqr,
    detect_outliers_mad,
    detect_outliers_modified_zscore,
    detect_outliers_zscore,
    mad,
)
from .ensemble import detect_outliers_ensemble
from .grubbs import detect_outliers_grubbs, grubbs_critical_value, grubbs_test
from .isolation import calculate_isolation_score, detect_outliers_isolation
from .schema import (
    AnomalySeverity,
    AnomalySummary,
    BaselineStats,
    ContextualAnomalyResult,
    EnsembleResult,
    MethodCount,
    OutlierDirection,
    OutlierResult,
)
from .scoring import SeverityMapper, overall_severity
from .summary import summarize_anomalies
from .temporal import detect_level_shifts, detect_spikes, detect_time_series_anomalies

__all__ = [
	"AnomalySeverity",
	"AnomalySummary",
	"BaselineStats",
	"ContextualAnomalyResult",
	"EnsembleResult",
	"MethodCount",
	"OutlierDirection",
	"OutlierResult",
	"mad",
	"detect_outliers_zscore",
	"detect_outliers_modified_zscore",
	"detect_outliers_mad",
	"detect_outliers_iqr",
	"grubbs_critical_value",
	"grubbs_test",
	"detect_outliers_grubbs",
	"detect_time_series_anomalies",
	"detect_spikes",
	"detect_level_shifts",
	"calculate_isolation_score",
	"detect_outliers_isolation",
	"detect_outliers_ensemble",
	"detect_contextual_anomalies",
	"summarize_anomalies",
	"SeverityMapper",
	"overall_severity",
]
