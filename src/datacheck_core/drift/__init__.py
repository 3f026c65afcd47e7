"""Drift detection module: baseline snapshots and distribution comparison.

Build a ``Baseline`` once from reference data, then compare any number of
new batches against it. Each comparison is independent and leaves the
baseline untouched.

- **Numeric columns** -- two-sample Kolmogorov-Smirnov statistic
- **Categorical columns** -- Population Stability Index (PSI)

Public API
----------
- ``create_baseline(dataset)`` -- snapshot a reference dataset
- ``detect(dataset, baseline, threshold, method)`` -- score drift per column
- ``ks_test(sample1, sample2)`` -- KS statistic and approximate p-value
- ``psi(baseline_dist, current_dist)`` -- PSI between two distributions
"""
from __future__ import annotations

from ._baseline import NUMERIC_SAMPLE_SIZE, create_baseline
from ._detector import DEFAULT_THRESHOLD, detect, detect_drift
from ._metrics import KS_SERIES_TERMS, PSI_FLOOR, ks_test, psi
from ._types import (
    Baseline,
    CategoricalColumnBaseline,
    ColumnBaseline,
    ColumnKind,
    ColumnMismatchError,
    DriftMethod,
    DriftResult,
    NumericColumnBaseline,
)

__all__ = [
    # Public functions
    "create_baseline",
    "detect",
    "detect_drift",
    "ks_test",
    "psi",
    # Types (re-exported for convenience)
    "Baseline",
    "ColumnBaseline",
    "NumericColumnBaseline",
    "CategoricalColumnBaseline",
    "ColumnKind",
    "DriftMethod",
    "DriftResult",
    "ColumnMismatchError",
    # Defaults
    "DEFAULT_THRESHOLD",
    "NUMERIC_SAMPLE_SIZE",
    "PSI_FLOOR",
    "KS_SERIES_TERMS",
]
