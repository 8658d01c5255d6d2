"""
Input validation shared by every public function.

Each helper copies caller input into a private list, so no algorithm can
mutate a sequence held by the caller.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, List, Tuple

from .exceptions import InvalidArgumentError, LengthMismatchError

# Squares and pairwise products of values up to this magnitude stay finite
MAX_MAGNITUDE = 1e100


def as_values(values: Iterable[float], name: str = "values") -> List[float]:
    """
    Copy a numeric sequence into a list of finite floats.

    Elements must satisfy abs(x) <= MAX_MAGNITUDE (1e100) so variances,
    covariances and sums of squares cannot overflow.

    Raises:
        InvalidArgumentError: If an element is not a real number, is NaN/inf
            or exceeds MAX_MAGNITUDE in absolute value
    """
    if values is None:
        raise InvalidArgumentError(f"{name} must be a sequence of numbers, got None")
    copied: List[float] = []
    for position, item in enumerate(values):
        if isinstance(item, bool) or not isinstance(item, Real):
            raise InvalidArgumentError(
                f"{name}[{position}] must be a real number, got {type(item).__name__}"
            )
        value = float(item)
        if not math.isfinite(value):
            raise InvalidArgumentError(f"{name}[{position}] must be finite, got {value}")
        if abs(value) > MAX_MAGNITUDE:
            raise InvalidArgumentError(
                f"{name}[{position}] must not exceed {MAX_MAGNITUDE:g} in magnitude, got {value}"
            )
        copied.append(value)
    return copied


def as_pair(
    x: Iterable[float], y: Iterable[float]
) -> Tuple[List[float], List[float]]:
    """Copy two paired sequences, requiring equal length."""
    xs = as_values(x, "x")
    ys = as_values(y, "y")
    if len(xs) != len(ys):
        raise LengthMismatchError(
            f"Paired sequences must have equal length, got {len(xs)} and {len(ys)}"
        )
    return xs, ys


def require_positive_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return value


def require_non_negative_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def require_range(
    value: float,
    name: str,
    low: float,
    high: float,
    low_inclusive: bool = True,
    high_inclusive: bool = True,
) -> float:
    """Check that a real parameter lies inside [low, high] (bounds optionally open)."""
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}")
    above = value >= low if low_inclusive else value > low
    below = value <= high if high_inclusive else value < high
    if not (above and below):
        left = "[" if low_inclusive else "("
        right = "]" if high_inclusive else ")"
        raise InvalidArgumentError(f"{name} must be in {left}{low}, {high}{right}, got {value}")
    return float(value)


def require_non_negative(value: float, name: str) -> float:
    return require_range(value, name, 0.0, math.inf, high_inclusive=False)
