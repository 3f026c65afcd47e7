"""Datacheck Core -- Statistics, outlier, correlation and drift engine for tabular data.

Snapshot your training data once. Check every production batch against it.

Quick start::

    from datacheck_core import create_baseline, detect, profile

    baseline = create_baseline(training_rows)
    result = detect(production_rows, baseline, threshold=0.05)
    print(result.drifted, result.columns_drifted)

    report = profile(production_rows, detailed=True)
    print(report.quality_score)
"""

__version__ = "0.3.0"

# Statistics
from .stats import (
    min_value,
    max_value,
    mean,
    median,
    variance,
    stdev,
    quantile,
    summary,
)

# Correlation
from .correlation import pearson, spearman, ranks, correlation_matrix

# Outliers
from .outliers import detect_iqr, detect_zscore, outlier_summary

# Drift
from .drift import (
    create_baseline,
    detect,
    detect_drift,
    ks_test,
    psi,
    Baseline,
    NumericColumnBaseline,
    CategoricalColumnBaseline,
    ColumnKind,
    DriftMethod,
    DriftResult,
    ColumnMismatchError,
)

# Profiler
from .profiler import profile, profile_file

# Columns and I/O
from ._columns import extract, columns, column_exists, count_non_null
from ._io import load_records

# Result types
from ._types import (
    StatSummary,
    IqrOutlierReport,
    ZScoreOutlierReport,
    ColumnProfile,
    ProfileResult,
)

__all__ = [
    "__version__",
    # Statistics
    "min_value",
    "max_value",
    "mean",
    "median",
    "variance",
    "stdev",
    "quantile",
    "summary",
    # Correlation
    "pearson",
    "spearman",
    "ranks",
    "correlation_matrix",
    # Outliers
    "detect_iqr",
    "detect_zscore",
    "outlier_summary",
    # Drift
    "create_baseline",
    "detect",
    "detect_drift",
    "ks_test",
    "psi",
    "Baseline",
    "NumericColumnBaseline",
    "CategoricalColumnBaseline",
    "ColumnKind",
    "DriftMethod",
    "DriftResult",
    "ColumnMismatchError",
    # Profiler
    "profile",
    "profile_file",
    # Columns and I/O
    "extract",
    "columns",
    "column_exists",
    "count_non_null",
    "load_records",
    # Result types
    "StatSummary",
    "IqrOutlierReport",
    "ZScoreOutlierReport",
    "ColumnProfile",
    "ProfileResult",
]
