"""
Unit tests for rolling z-score, spike and level-shift detection.
"""

from riskstats.anomaly.schema import OutlierDirection
from riskstats.anomaly.temporal import (
    detect_level_shifts,
    detect_spikes,
    detect_time_series_anomalies,
)


def test_rolling_zscore_flags_spike(spike_series):
    results = detect_time_series_anomalies(spike_series, window=5, threshold=3.0)
    assert [r.index for r in results] == [6]
    assert results[0].method == "rolling_zscore"


def test_rolling_zscore_needs_warmup():
    assert detect_time_series_anomalies([1, 2, 300], window=5) == []


def test_spike_reverts():
    data = [10, 10, 11, 10, 10, 50, 10, 11, 10, 10]
    results = detect_spikes(data, window=5)
    assert [r.index for r in results] == [5]
    assert results[0].direction == OutlierDirection.HIGH
    assert results[0].method == "spike"


def test_last_point_spike():
    results = detect_spikes([10, 10, 11, 10, 10, 50], window=5)
    assert [r.index for r in results] == [5]


def test_step_is_not_a_spike(step_series):
    assert detect_spikes(step_series, window=5) == []


def _noisy_step():
    return [10.0 + (i % 3) for i in range(10)] + [30.0 + (i % 3) for i in range(10)]


def test_level_shift_up():
    results = detect_level_shifts(_noisy_step(), window=5)
    assert len(results) == 1
    assert results[0].index == 10
    assert results[0].direction == OutlierDirection.HIGH
    assert results[0].method == "level_shift"


def test_level_shift_down():
    results = detect_level_shifts(list(reversed(_noisy_step())), window=5)
    assert [r.index for r in results] == [10]
    assert results[0].direction == OutlierDirection.LOW


def test_spike_is_not_a_level_shift():
    data = [10.0] * 10 + [50.0] + [10.0] * 9
    assert detect_level_shifts(data, window=5) == []


def test_flat_baseline_is_not_scored():
    data = [100.0] * 10 + [100.001]
    assert detect_time_series_anomalies(data) == []
    assert detect_spikes(data, window=5) == []


def test_flat_halves_are_not_a_level_shift():
    data = [5.0] * 10 + [5.0001] * 10
    assert detect_level_shifts(data, window=10) == []
