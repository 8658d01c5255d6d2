"""
Unit tests for isolation scoring.
"""

import numpy as np
import pytest

from riskstats.anomaly.isolation import calculate_isolation_score, detect_outliers_isolation
from riskstats.core.exceptions import InvalidArgumentError
from riskstats.stats import z_scores


def test_outlier_isolates_faster(spike_series):
    outlier = calculate_isolation_score(100.0, spike_series)
    normal = calculate_isolation_score(11.0, spike_series)

    assert 0.0 < normal < 0.6 < outlier <= 1.0


def test_scores_are_reproducible(spike_series):
    assert calculate_isolation_score(12.0, spike_series) == calculate_isolation_score(12.0, spike_series)


def test_symmetric_data_scores_symmetrically():
    left = calculate_isolation_score(1.0, [1.0, 2.0, 3.0])
    right = calculate_isolation_score(3.0, [1.0, 2.0, 3.0])
    assert left == pytest.approx(right, abs=0.1)


def test_degenerate_populations_score_zero():
    assert calculate_isolation_score(5.0, [5.0]) == 0.0
    assert calculate_isolation_score(5.0, [3.0, 3.0, 3.0]) == 0.0


def test_detect_isolation_outliers(spike_series):
    results = detect_outliers_isolation(spike_series)
    assert [r.index for r in results] == [6]
    assert results[0].method == "isolation"
    assert results[0].threshold == 0.6


def test_gaussian_sample_center_is_not_flagged():
    sample = np.random.default_rng(1).normal(100.0, 10.0, 200).tolist()
    z = z_scores(sample)

    results = detect_outliers_isolation(sample)

    assert len(results) < len(sample) * 0.1
    assert all(abs(z[r.index]) >= 1.0 for r in results)


def test_large_magnitudes_keep_resolution():
    data = [1e9 + v for v in (0.0, 1.0, 0.5, 1.5, 0.25, 1.25, 0.75, 40.0)]
    assert [r.index for r in detect_outliers_isolation(data)] == [7]


def test_isolation_threshold_range():
    with pytest.raises(InvalidArgumentError):
        detect_outliers_isolation([1, 2, 3], threshold=1.5)
    assert detect_outliers_isolation([1.0]) == []
    assert detect_outliers_isolation([2.0, 2.0, 2.0]) == []
