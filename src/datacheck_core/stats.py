"""Descriptive statistics over numeric samples.

Every function takes a sequence of real numbers and never mutates it.
Undefined statistics (an empty sample) come back as ``None`` so callers can
treat a missing statistic as data rather than as an exception.

Public API:
    min_value, max_value — Extremes
    mean, median         — Central tendency
    variance, stdev      — Population variability (divide by n)
    quantile             — Linear-interpolation quantile
    summary              — All of the above as a ``StatSummary``
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ._types import StatSummary


def as_series(xs: Sequence[float]) -> pd.Series:
    """Numeric sample as a float64 ``pandas.Series``."""
    return pd.Series(list(xs), dtype="float64")


def scaled(series: pd.Series) -> Tuple[float, pd.Series]:
    """Split a sample into ``(scale, series / scale)`` with values in ``[-2, 2]``.

    ``scale`` is a power of two, so the division is exact. Sums of squares
    over the scaled values stay finite for any finite input.
    """
    largest = float(series.abs().max())
    if largest == 0.0:
        return 1.0, series
    scale = math.ldexp(1.0, math.frexp(largest)[1] - 1)
    return scale, series / scale


def min_value(xs: Sequence[float]) -> Optional[float]:
    """Smallest value, or ``None`` for an empty sample."""
    if not len(xs):
        return None
    return min(xs)


def max_value(xs: Sequence[float]) -> Optional[float]:
    """Largest value, or ``None`` for an empty sample."""
    if not len(xs):
        return None
    return max(xs)


def mean(xs: Sequence[float]) -> Optional[float]:
    """Arithmetic mean, or ``None`` for an empty sample.

    Examples::

        >>> mean([1, 2, 3, 4, 5])
        3.0
        >>> mean([]) is None
        True
    """
    if not len(xs):
        return None
    series = as_series(xs)
    with np.errstate(over="ignore"):
        avg = float(series.mean())
    if not math.isfinite(avg):
        scale, unit = scaled(series)
        avg = scale * float(unit.mean())
    # A constant sample must have its own value as the mean.
    return float(min(max(avg, min(xs)), max(xs)))


def median(xs: Sequence[float]) -> Optional[float]:
    """Middle value for odd lengths, mean of the two middle values otherwise."""
    if not len(xs):
        return None
    return float(as_series(xs).median())


def stdev(xs: Sequence[float]) -> Optional[float]:
    """Population standard deviation (``ddof=0``).

    ``0.0`` for a single value or a constant sample, ``None`` for an empty
    sample.
    """
    if not len(xs):
        return None
    if len(xs) == 1 or min(xs) == max(xs):
        return 0.0
    scale, unit = scaled(as_series(xs))
    return scale * float(unit.std(ddof=0))


def variance(xs: Sequence[float]) -> Optional[float]:
    """Population variance, ``stdev ** 2``.

    ``None`` for an empty sample, and also when the variance of a finite
    sample is too large to represent as a float.
    """
    sd = stdev(xs)
    if sd is None:
        return None
    var = sd * sd
    return var if math.isfinite(var) else None


def quantile(xs: Sequence[float], p: float) -> Optional[float]:
    """Quantile ``p`` in ``[0, 1]`` by linear interpolation between order statistics.

    The fractional rank is ``p * (n - 1)``, which is the pandas default
    interpolation.

    Examples::

        >>> quantile(list(range(1, 11)), 0.5)
        5.5
        >>> quantile(list(range(1, 11)), 0.75)
        7.75

    Raises:
        ValueError: If ``p`` lies outside ``[0, 1]``.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Quantile must be within [0, 1], got {p}")
    if not len(xs):
        return None
    return float(as_series(xs).quantile(p, interpolation="linear"))


def summary(xs: Sequence[float]) -> StatSummary:
    """Collect count, extremes, centre, spread and quartiles of a sample."""
    return StatSummary(
        count=len(xs),
        min=min_value(xs),
        max=max_value(xs),
        mean=mean(xs),
        median=median(xs),
        stdev=stdev(xs),
        variance=variance(xs),
        q25=quantile(xs, 0.25),
        q75=quantile(xs, 0.75),
    )
