"""
Unit tests for contextual anomalies and anomaly summaries.
"""

import pytest

from riskstats.anomaly.contextual import detect_contextual_anomalies
from riskstats.anomaly.detectors import detect_outliers_zscore
from riskstats.anomaly.schema import AnomalySeverity, OutlierDirection
from riskstats.anomaly.summary import summarize_anomalies
from riskstats.core.exceptions import InvalidArgumentError

VOLATILE_WITH_CALM_STRETCH = [
    0, 50, 0, 50, 0, 50, 10, 10, 10, 25, 10, 10, 10, 50, 0, 50, 0,
]


def test_contextual_bump_in_calm_stretch():
    results = detect_contextual_anomalies(VOLATILE_WITH_CALM_STRETCH, window_size=3, threshold=2.5)

    assert [r.index for r in results] == [9]
    result = results[0]
    assert result.value == 25.0
    assert result.direction == OutlierDirection.HIGH
    assert result.method == "contextual"
    assert result.expected_min < 10.0 < result.expected_max
    assert result.expected_min == pytest.approx(10.0, abs=1e-3)
    assert result.expected_max == pytest.approx(10.0, abs=1e-3)


def test_contextual_value_is_ordinary_globally():
    assert 9 not in [r.index for r in detect_outliers_zscore(VOLATILE_WITH_CALM_STRETCH, 2.5)]


def test_contextual_edges():
    assert detect_contextual_anomalies([5.0]) == []
    assert detect_contextual_anomalies([]) == []
    with pytest.raises(InvalidArgumentError):
        detect_contextual_anomalies([1, 2, 3], window_size=0)


def test_summary_of_single_spike(spike_series):
    summary = summarize_anomalies(spike_series)

    assert summary.total_points == 10
    assert summary.outlier_count == 1
    assert summary.outlier_rate == pytest.approx(0.1)
    assert summary.outlier_percentage == pytest.approx(10.0)
    assert summary.high_count == 1
    assert summary.low_count == 0
    assert summary.severity == AnomalySeverity.CRITICAL
    assert summary.most_anomalous is not None
    assert summary.most_anomalous.index == 6
    # Ties on count are ordered by method name
    assert [m.method for m in summary.method_counts] == [
        "grubbs", "iqr", "mad", "modified_zscore", "zscore",
    ]


def test_summary_method_counts_by_frequency(masked_series):
    summary = summarize_anomalies(masked_series)

    assert summary.outlier_count == 2
    assert summary.most_anomalous.index == 6
    counts = [(m.method, m.count) for m in summary.method_counts]
    assert counts == [
        ("grubbs", 2), ("iqr", 2), ("mad", 2), ("modified_zscore", 2), ("zscore", 1),
    ]


def test_summary_of_empty_input():
    summary = summarize_anomalies([])
    assert summary.total_points == 0
    assert summary.outlier_count == 0
    assert summary.most_anomalous is None
    assert summary.severity == AnomalySeverity.NONE
