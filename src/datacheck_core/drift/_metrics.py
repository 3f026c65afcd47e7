"""Distribution comparison metrics: two-sample KS test and PSI."""
from __future__ import annotations

import math
from typing import Any, Mapping, Sequence, Tuple

import numpy as np

PSI_FLOOR = 0.001
KS_SERIES_TERMS = 10


def _kolmogorov_p_value(lam: float, terms: int = KS_SERIES_TERMS) -> float:
    if lam < 0:
        return 0.0
    series = math.fsum(
        (-1) ** (k - 1) * math.exp(-2 * k * k * lam * lam)
        for k in range(1, terms + 1)
    )
    return max(0.0, min(1.0, 1.0 - 2.0 * series))


def ks_test(sample1: Sequence[float], sample2: Sequence[float]) -> Tuple[float, float]:
    """Two-sample Kolmogorov-Smirnov test.

    The statistic is the largest gap between the two empirical CDFs,
    evaluated at every value of either sample with ``numpy.searchsorted``.

    The p-value is an asymptotic approximation from the Kolmogorov series:
    with ``n_eff = n1*n2/(n1+n2)`` and ``lam = D * sqrt(n_eff)`` it is
    ``1 - 2 * sum((-1)**(k-1) * exp(-2 k^2 lam^2), k=1..10)`` clamped to
    ``[0, 1]``. It is not an exact tail probability and is unreliable for
    small samples; drift decisions use the statistic only.

    Returns:
        ``(statistic, p_value)``. ``(0.0, 1.0)`` when either sample is empty.

    Examples::

        >>> ks_test([1, 2, 3, 4, 5], [1, 2, 3, 4, 5])[0]
        0.0
    """
    if not len(sample1) or not len(sample2):
        return 0.0, 1.0

    sorted1 = np.sort(np.asarray(sample1, dtype="float64"))
    sorted2 = np.sort(np.asarray(sample2, dtype="float64"))
    n1 = len(sorted1)
    n2 = len(sorted2)

    points = np.concatenate([sorted1, sorted2])
    cdf1 = np.searchsorted(sorted1, points, side="right") / n1
    cdf2 = np.searchsorted(sorted2, points, side="right") / n2
    statistic = float(np.max(np.abs(cdf1 - cdf2)))

    effective_n = n1 * n2 / (n1 + n2)
    lam = statistic * math.sqrt(effective_n)
    return statistic, _kolmogorov_p_value(lam)


def psi(
    baseline_dist: Mapping[Any, float],
    current_dist: Mapping[Any, float],
    floor: float = PSI_FLOOR,
) -> float:
    """Population Stability Index between two category-to-proportion maps.

    Sums ``(cur - base) * ln(cur / base)`` over the union of categories. A
    category missing from either side (or present with proportion zero) is
    given ``floor`` instead, so the log never sees zero.

    Rule of thumb: below 0.1 no significant shift, 0.1-0.2 moderate, above
    0.2 significant.

    Examples::

        >>> psi({"A": 0.5, "B": 0.5}, {"A": 0.5, "B": 0.5})
        0.0
    """
    categories = list(dict.fromkeys([*baseline_dist, *current_dist]))

    terms = []
    for category in categories:
        base = baseline_dist.get(category) or floor
        cur = current_dist.get(category) or floor
        terms.append((cur - base) * math.log(cur / base))

    return math.fsum(terms)
