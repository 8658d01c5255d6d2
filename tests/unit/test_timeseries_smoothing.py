"""
Unit tests for moving averages and length-preserving filters.
"""

from math import isclose

import pytest

from riskstats.core.exceptions import InvalidArgumentError
from riskstats.timeseries import dema, ema, hp_filter, savitzky_golay, sma, tema, wma


def test_sma_values_and_edges():
    assert sma([1, 2, 3, 4, 5], 3) == [2.0, 3.0, 4.0]
    assert sma([1, 2, 3], 5) == [2.0]
    assert sma([4, 5], 1) == [4.0, 5.0]
    assert sma([], 3) == []


def test_sma_rejects_non_positive_window():
    with pytest.raises(InvalidArgumentError):
        sma([1, 2, 3], 0)


def test_wma_weights_recent_points():
    result = wma([1, 2, 3, 4], 3)
    assert len(result) == 2
    assert isclose(result[0], 14.0 / 6.0)
    assert isclose(result[1], 20.0 / 6.0)
    assert len(wma([1, 2], 5)) == 1


def test_ema_family_on_ramp(ramp_series):
    e1 = ema(ramp_series, 5)
    e2 = dema(ramp_series, 5)
    e3 = tema(ramp_series, 5)

    assert len(e1) == 26
    assert len(e2) == 22
    assert len(e3) == 18
    assert isclose(e1[0], 3.0)
    assert isclose(e1[-1], 28.0, rel_tol=1e-9)
    # Double and triple smoothing remove the lag on a linear ramp
    assert isclose(e2[-1], 30.0, rel_tol=1e-9)
    assert isclose(e3[-1], 30.0, rel_tol=1e-9)


def test_ema_empty_input():
    assert ema([], 3) == []
    assert dema([], 3) == []
    assert tema([], 3) == []


def test_hp_filter_preserves_length_and_sums():
    data = [3.0, 5.0, 4.0, 8.0, 7.0, 10.0, 9.0, 13.0]
    result = hp_filter(data, lamb=100)
    assert len(result.trend) == len(data)
    assert len(result.cycle) == len(data)
    for value, trend, cycle in zip(data, result.trend, result.cycle):
        assert isclose(trend + cycle, value, abs_tol=1e-9)


def test_hp_filter_leaves_linear_series_in_trend():
    data = [2.0 * i + 1.0 for i in range(12)]
    result = hp_filter(data)
    for value, trend in zip(data, result.trend):
        assert isclose(trend, value, abs_tol=1e-6)


def test_hp_filter_short_and_invalid_input():
    short = hp_filter([1.0, 2.0])
    assert short.trend == [1.0, 2.0]
    assert short.cycle == [0.0, 0.0]
    with pytest.raises(InvalidArgumentError):
        hp_filter([1, 2, 3], lamb=-1)


def test_savitzky_golay_keeps_quadratic():
    data = [float(i * i) for i in range(10)]
    smoothed = savitzky_golay(data, window=5, polyorder=2)
    assert len(smoothed) == len(data)
    for value, fitted in zip(data, smoothed):
        assert isclose(fitted, value, abs_tol=1e-6)


def test_savitzky_golay_argument_checks():
    with pytest.raises(InvalidArgumentError):
        savitzky_golay([1, 2, 3, 4, 5, 6], window=4)
    with pytest.raises(InvalidArgumentError):
        savitzky_golay([1, 2, 3, 4, 5, 6], window=3, polyorder=3)
    assert savitzky_golay([1.0, 2.0], window=5) == [1.0, 2.0]
