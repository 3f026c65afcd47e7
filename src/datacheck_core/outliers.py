"""Outlier detection over numeric samples.

Two methods:

- **IQR** (Tukey's fences): values strictly below ``Q1 - 1.5*IQR`` or above
  ``Q3 + 1.5*IQR`` are outliers.
- **Z-score**: values whose ``|x - mean| / stdev`` exceeds the threshold
  (default 3) are outliers. A constant sample has no outliers.

Reports carry the statistics used to flag each value, not just the flags.

Public API:
    detect_iqr      — Tukey-fence outliers
    detect_zscore   — Z-score outliers
    outlier_summary — Dispatch on ``method="iqr" | "zscore"``
"""

from __future__ import annotations

from typing import Sequence

from . import stats
from ._types import IqrOutlierReport, OutlierReport, ZScoreOutlierReport

__all__ = ["detect_iqr", "detect_zscore", "outlier_summary"]

IQR_MULTIPLIER = 1.5
DEFAULT_Z_THRESHOLD = 3.0


def detect_iqr(values: Sequence[float]) -> IqrOutlierReport:
    """Detect outliers with the interquartile-range fences.

    Args:
        values: Numeric sample.

    Returns:
        ``IqrOutlierReport`` with the flagged values and indices, quartiles,
        IQR and fences. An empty sample gives an empty, fence-less report.
    """
    if not values:
        return IqrOutlierReport()

    series = stats.as_series(values)
    q1 = stats.quantile(values, 0.25)
    q3 = stats.quantile(values, 0.75)
    iqr = q3 - q1
    lower_fence = q1 - IQR_MULTIPLIER * iqr
    upper_fence = q3 + IQR_MULTIPLIER * iqr

    flagged = (series < lower_fence) | (series > upper_fence)
    indices = series.index[flagged].tolist()

    return IqrOutlierReport(
        outliers=[values[i] for i in indices],
        outlier_indices=indices,
        outlier_count=len(indices),
        q1=q1,
        q3=q3,
        iqr=iqr,
        lower_fence=lower_fence,
        upper_fence=upper_fence,
    )


def detect_zscore(
    values: Sequence[float],
    threshold: float = DEFAULT_Z_THRESHOLD,
) -> ZScoreOutlierReport:
    """Detect outliers by absolute z-score.

    Args:
        values: Numeric sample.
        threshold: Absolute z-score above which a value is an outlier.

    Returns:
        ``ZScoreOutlierReport`` with mean, stdev and one z-score per value.
    """
    avg = stats.mean(values)
    sd = stats.stdev(values)

    if sd is None or sd == 0.0:
        return ZScoreOutlierReport(mean=avg, stdev=sd, threshold=threshold)

    series = stats.as_series(values)
    z = (series - avg).abs() / sd
    indices = z.index[z > threshold].tolist()

    return ZScoreOutlierReport(
        outliers=[values[i] for i in indices],
        outlier_indices=indices,
        outlier_count=len(indices),
        mean=avg,
        stdev=sd,
        threshold=threshold,
        z_scores=z.tolist(),
    )


def outlier_summary(
    values: Sequence[float],
    method: str = "iqr",
    threshold: float = DEFAULT_Z_THRESHOLD,
) -> OutlierReport:
    """Run the requested outlier detector.

    ``threshold`` only applies to the z-score method.

    Raises:
        ValueError: If ``method`` is not ``"iqr"`` or ``"zscore"``.
    """
    if method == "iqr":
        return detect_iqr(values)
    if method == "zscore":
        return detect_zscore(values, threshold=threshold)
    raise ValueError(f"Unknown outlier method '{method}'. Use 'iqr' or 'zscore'.")
