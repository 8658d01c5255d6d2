"""
Unit tests for covariance, correlation and regression.
"""

from math import isclose

import pytest

from riskstats.core.exceptions import LengthMismatchError
from riskstats.stats import correlation, covariance, linear_regression


def test_covariance_population_and_sample():
    assert isclose(covariance([1, 2, 3], [2, 4, 6]), 4.0 / 3.0)
    assert isclose(covariance([1, 2, 3], [2, 4, 6], sample=True), 2.0)
    assert covariance([], []) == 0.0
    assert covariance([1], [2], sample=True) == 0.0


def test_correlation_bounds():
    assert isclose(correlation([1, 2, 3, 4], [10, 20, 30, 40]), 1.0)
    assert isclose(correlation([1, 2, 3, 4], [8, 6, 4, 2]), -1.0)
    r = correlation([1, 2, 3, 4, 5], [2, 1, 4, 3, 5])
    assert -1.0 <= r <= 1.0


def test_correlation_zero_variance_is_zero():
    assert correlation([1, 1, 1], [1, 2, 3]) == 0.0
    assert correlation([], []) == 0.0


def test_length_mismatch_raises():
    with pytest.raises(LengthMismatchError):
        covariance([1, 2, 3], [1, 2])
    with pytest.raises(ValueError):
        correlation([1, 2], [1])
    with pytest.raises(LengthMismatchError):
        linear_regression([1, 2, 3], [1, 2, 3, 4])


def test_linear_regression_exact_fit():
    fit = linear_regression([1, 2, 3, 4], [3, 5, 7, 9])
    assert isclose(fit.slope, 2.0)
    assert isclose(fit.intercept, 1.0)
    assert isclose(fit.r2, 1.0)
    assert isclose(fit.predict(5), 11.0)


def test_linear_regression_degenerate_input():
    assert linear_regression([1], [5]).slope == 0.0
    flat = linear_regression([1, 2, 3], [4, 4, 4])
    assert flat.slope == 0.0
    assert flat.intercept == 4.0
    assert flat.r2 == 0.0
