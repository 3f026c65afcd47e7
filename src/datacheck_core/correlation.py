"""Correlation analysis between numeric columns.

Public API:
    pearson            — Linear correlation of two equal-length samples
    spearman           — Rank correlation, ties get their average rank
    ranks              — 1-based average ranks in input order
    correlation_matrix — Pairwise Pearson correlation over dataset columns

Both coefficients return ``None`` when the correlation is undefined: samples
of different lengths, fewer than two values, or a constant sample.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Hashable, List, Optional, Sequence

from . import stats
from ._columns import Dataset, is_numeric, non_null

__all__ = ["pearson", "spearman", "ranks", "correlation_matrix"]


def _degenerate(x: Sequence[float], y: Sequence[float]) -> bool:
    return len(x) != len(y) or len(x) < 2


def _constant(xs: Sequence[float]) -> bool:
    return min(xs) == max(xs)


def pearson(x: Sequence[float], y: Sequence[float]) -> Optional[float]:
    """Pearson correlation coefficient in ``[-1, 1]``.

    Computed as ``covariance / (n * stdev(x) * stdev(y))``, written with the
    sums of squares so perfectly linear samples land exactly on +/-1. Both
    samples are scaled by a power of two first, which leaves the coefficient
    unchanged and keeps large finite values from overflowing.

    Examples::

        >>> pearson([1, 2, 3], [2, 4, 6])
        1.0
        >>> pearson([1, 1, 1], [1, 2, 3]) is None
        True
    """
    if _degenerate(x, y) or _constant(x) or _constant(y):
        return None

    _, unit_x = stats.scaled(stats.as_series(x))
    _, unit_y = stats.scaled(stats.as_series(y))
    dev_x = unit_x - unit_x.mean()
    dev_y = unit_y - unit_y.mean()

    ss_x = float((dev_x * dev_x).sum())
    ss_y = float((dev_y * dev_y).sum())
    if ss_x == 0.0 or ss_y == 0.0:
        return None

    r = float((dev_x * dev_y).sum()) / math.sqrt(ss_x * ss_y)
    return max(-1.0, min(1.0, r))


def ranks(values: Sequence[float]) -> List[float]:
    """Rank values from 1, giving tied values the average of their ranks.

    Examples::

        >>> ranks([10, 20, 10, 30])
        [1.5, 3.0, 1.5, 4.0]
    """
    return stats.as_series(values).rank(method="average").tolist()


def spearman(x: Sequence[float], y: Sequence[float]) -> Optional[float]:
    """Spearman rank correlation: Pearson correlation of the average ranks."""
    if _degenerate(x, y):
        return None
    return pearson(ranks(x), ranks(y))


def correlation_matrix(
    dataset: Dataset,
    columns: Sequence[Hashable],
    undefined: Optional[float] = 0.0,
) -> Dict[Hashable, Dict[Hashable, Optional[float]]]:
    """Pairwise Pearson correlations for ``columns``.

    Each column's non-null values are extracted independently, so columns
    with nulls in different rows may end up with different lengths and an
    undefined correlation. The diagonal is always ``1.0``.

    Args:
        dataset: Rows as mappings, or a DataFrame.
        columns: Column names to correlate.
        undefined: Entry used where the correlation is undefined (constant
            or mismatched columns). ``0.0`` keeps the long-standing
            behaviour; pass ``None`` to keep undefined entries distinct from
            a genuine zero correlation.

    Returns:
        Nested dict where ``matrix[a][b]`` is the correlation of a and b.
    """
    data: Dict[Hashable, List[Any]] = {}
    for col in columns:
        values = non_null(dataset, col)
        data[col] = values if all(is_numeric(v) for v in values) else []

    matrix: Dict[Hashable, Dict[Hashable, Optional[float]]] = {}
    for col_a in columns:
        row: Dict[Hashable, Optional[float]] = {}
        for col_b in columns:
            if col_a == col_b:
                row[col_b] = 1.0
                continue
            corr = pearson(data[col_a], data[col_b])
            row[col_b] = undefined if corr is None else corr
        matrix[col_a] = row

    return matrix
