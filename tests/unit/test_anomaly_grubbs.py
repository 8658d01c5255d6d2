"""
Unit tests for Grubbs' test.
"""

import math

import pytest

from riskstats.anomaly.grubbs import detect_outliers_grubbs, grubbs_critical_value, grubbs_test
from riskstats.core.exceptions import InvalidArgumentError


def test_critical_value_matches_table():
    # Published two-sided table: n=10, alpha=0.05 -> 2.290
    assert abs(grubbs_critical_value(10, 0.05) - 2.290) < 0.01
    assert grubbs_critical_value(10, 0.01) > grubbs_critical_value(10, 0.05)
    assert grubbs_critical_value(2, 0.05) == math.inf


def test_critical_value_rejects_bad_significance():
    with pytest.raises(InvalidArgumentError):
        grubbs_critical_value(10, 0.0)
    with pytest.raises(InvalidArgumentError):
        grubbs_critical_value(10, 1.0)


def test_single_test_finds_most_extreme(spike_series):
    result = grubbs_test(spike_series)
    assert result is not None
    assert result.index == 6
    assert result.method == "grubbs"
    assert result.score > result.threshold


def test_single_test_degenerate_input():
    assert grubbs_test([1.0, 50.0]) is None
    assert grubbs_test([3.0] * 8) is None
    assert grubbs_test([10, 11, 10, 12, 11, 10]) is None


def test_iterative_removal_defeats_masking(masked_series):
    results = detect_outliers_grubbs(masked_series, 0.05, 5)

    assert [r.index for r in results] == [3, 6]
    assert [r.value for r in results] == [100.0, 200.0]


def test_iteration_limit(masked_series):
    results = detect_outliers_grubbs(masked_series, 0.05, max_iterations=1)
    assert [r.index for r in results] == [6]
    assert detect_outliers_grubbs(masked_series, 0.05, max_iterations=0) == []


def test_iterative_rejects_bad_significance_without_iterating():
    with pytest.raises(InvalidArgumentError):
        detect_outliers_grubbs([1, 2, 3], significance=5, max_iterations=0)
