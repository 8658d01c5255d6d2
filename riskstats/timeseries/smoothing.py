"""
Length-preserving smoothing filters used to denoise a series before trend
or anomaly analysis.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np
from scipy import sparse
from scipy.signal import savgol_filter
from scipy.sparse.linalg import spsolve

from riskstats.core.exceptions import InvalidArgumentError
from riskstats.core.validation import (
    as_values,
    require_non_negative,
    require_non_negative_int,
    require_positive_int,
)

from .schema import HPFilterResult

logger = logging.getLogger(__name__)


def hp_filter(data: Iterable[float], lamb: float = 1600.0) -> HPFilterResult:
    """
    Hodrick-Prescott filter.

    Solves (I + lamb * D'D) trend = y where D is the second-difference
    operator; cycle = y - trend. Typical lamb: 100 annual, 1600 quarterly,
    129600 monthly.

    Args:
        data: Series ordered by time
        lamb: Smoothing penalty (0 returns the input as the trend)

    Returns:
        HPFilterResult with trend and cycle of the input length
    """
    lamb = require_non_negative(lamb, "lamb")
    values = as_values(data)
    n = len(values)
    if n < 3:
        return HPFilterResult(trend=list(values), cycle=[0.0] * n)

    y = np.asarray(values, dtype=float)
    second_diff = sparse.diags([1.0, -2.0, 1.0], [0, 1, 2], shape=(n - 2, n))
    system = sparse.identity(n, format="csc") + lamb * (second_diff.T @ second_diff)
    trend = np.asarray(spsolve(system.tocsc(), y), dtype=float)
    cycle = y - trend
    return HPFilterResult(trend=trend.tolist(), cycle=cycle.tolist())


def savitzky_golay(data: Iterable[float], window: int = 5, polyorder: int = 2) -> List[float]:
    """
    Savitzky-Golay smoothing (local least-squares polynomial fit).

    Preserves peaks better than a moving average. Series shorter than the
    window are returned unchanged.
    """
    window = require_positive_int(window, "window")
    polyorder = require_non_negative_int(polyorder, "polyorder")
    if window % 2 == 0:
        raise InvalidArgumentError(f"window must be odd, got {window}")
    if polyorder >= window:
        raise InvalidArgumentError(
            f"polyorder must be less than window, got polyorder={polyorder}, window={window}"
        )

    values = as_values(data)
    if len(values) < window:
        logger.debug("savitzky_golay: series of %d shorter than window %d", len(values), window)
        return values

    smoothed = savgol_filter(np.asarray(values, dtype=float), window, polyorder, mode="interp")
    return [float(v) for v in smoothed]
