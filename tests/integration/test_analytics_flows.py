"""
Integration tests: end-to-end predictive analytics and alerting flows.

Exercises the calls a forecasting service and an alerting service chain
together on one series.
"""

import pytest

from riskstats import describe, describe_time_series, summarize_anomalies
from riskstats.anomaly import (
    AnomalySeverity,
    OutlierDirection,
    detect_level_shifts,
    detect_outliers_ensemble,
    detect_spikes,
    detect_time_series_anomalies,
)
from riskstats.timeseries import (
    TrendDirection,
    detect_trend,
    forecast_linear,
    forecast_ses,
    hp_filter,
    savitzky_golay,
    sma,
)


def _daily_transactions(spike_at=None):
    values = [100.0 + (i % 3) for i in range(30)]
    if spike_at is not None:
        values[spike_at] = 200.0
    return values


@pytest.mark.integration
def test_prediction_flow(noisy_uptrend):
    snapshot = list(noisy_uptrend)

    overview = describe_time_series(noisy_uptrend)
    assert overview.length == 40
    assert overview.trend.direction == TrendDirection.UP
    assert overview.trend.strength > 0.9

    smoothed = hp_filter(noisy_uptrend, lamb=100)
    assert detect_trend(smoothed.trend).direction == TrendDirection.UP
    assert len(savitzky_golay(noisy_uptrend, window=7, polyorder=2)) == 40

    linear = forecast_linear(noisy_uptrend, 5)
    assert len(linear.forecast) == 5
    assert linear.forecast == sorted(linear.forecast)
    for low, point, high in zip(linear.lower, linear.forecast, linear.upper):
        assert low < point < high
    assert linear.forecast[0] > noisy_uptrend[0]

    flat = forecast_ses(noisy_uptrend, 3)
    assert len(set(flat.forecast)) == 1

    assert noisy_uptrend == snapshot


@pytest.mark.integration
def test_alerting_flow_on_spike():
    series = _daily_transactions(spike_at=12)

    summary = summarize_anomalies(series)
    assert summary.outlier_count == 1
    assert summary.most_anomalous.index == 12
    assert summary.most_anomalous.direction == OutlierDirection.HIGH
    assert summary.severity == AnomalySeverity.CRITICAL

    assert [r.index for r in detect_spikes(series)] == [12]
    assert [r.index for r in detect_time_series_anomalies(series)] == [12]
    assert detect_level_shifts(series) == []


@pytest.mark.integration
def test_alerting_flow_on_regime_change():
    series = [100.0 + (i % 3) for i in range(20)] + [150.0 + (i % 3) for i in range(20)]

    shifts = detect_level_shifts(series, window=10)
    assert len(shifts) == 1
    assert shifts[0].index == 20
    assert shifts[0].direction == OutlierDirection.HIGH

    before = describe(series[:20])
    after = describe(series[20:])
    assert after.mean - before.mean == pytest.approx(50.0)


@pytest.mark.integration
def test_quiet_series_raises_no_alerts():
    series = _daily_transactions()

    assert detect_outliers_ensemble(series) == []
    summary = summarize_anomalies(series)
    assert summary.outlier_count == 0
    assert summary.severity == AnomalySeverity.NONE
    assert sma(series, 3) == pytest.approx([101.0] * 28)
