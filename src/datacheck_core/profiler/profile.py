"""Dataset profiling utilities."""

import logging
from typing import Any, Dict, Hashable, List, Optional

from .. import stats
from .._io import load_records
from .._types import ColumnProfile, ProfileResult
from .._columns import Dataset, columns, extract, is_null, is_numeric
from ..correlation import correlation_matrix
from ..outliers import outlier_summary

logger = logging.getLogger(__name__)

TYPE_SAMPLE_SIZE = 100
NUMERIC_TYPES = {"integer", "float", "number"}


def infer_type(values: List[Any]) -> str:
    """Infer a column type from a sample of its non-null values."""
    if not values:
        return "unknown"

    sample = values[:TYPE_SAMPLE_SIZE]

    if all(isinstance(v, int) and not isinstance(v, bool) for v in sample):
        return "integer"
    if all(isinstance(v, float) for v in sample):
        return "float"
    if all(is_numeric(v) for v in sample):
        return "number"
    if all(isinstance(v, str) for v in sample):
        return "string"
    if all(isinstance(v, bool) for v in sample):
        return "boolean"
    if all(isinstance(v, (list, tuple)) for v in sample):
        return "list"
    if all(isinstance(v, dict) for v in sample):
        return "map"
    return "mixed"


def _cardinality(values: List[Any]) -> int:
    """Count distinct values; ``1``, ``1.0`` and ``True`` are three values here."""
    distinct = set()
    for v in values:
        try:
            distinct.add((type(v), v))
        except TypeError:
            distinct.add((type(v), repr(v)))
    return len(distinct)


def _profile_column(
    values: List[Any],
    detailed: bool,
    outlier_method: str,
) -> ColumnProfile:
    present = [v for v in values if not is_null(v)]
    col_type = infer_type(present)

    fields: Dict[str, Any] = {
        "type": col_type,
        "missing": len(values) - len(present),
        "cardinality": _cardinality(present),
    }

    # The type sample may miss a stray non-number further down.
    if col_type in NUMERIC_TYPES and all(is_numeric(v) for v in present):
        fields.update(
            min=stats.min_value(present),
            max=stats.max_value(present),
            mean=stats.mean(present),
            median=stats.median(present),
            stdev=stats.stdev(present),
        )
        if detailed:
            fields["outliers"] = outlier_summary(present, method=outlier_method)

    return ColumnProfile(**fields)


def _quality_score(row_count: int, profiles: Dict[Hashable, ColumnProfile]) -> float:
    if row_count == 0:
        return 0.0
    if not profiles:
        return 1.0
    total_cells = row_count * len(profiles)
    missing = sum(p.missing for p in profiles.values())
    return (total_cells - missing) / total_cells


def profile(
    dataset: Dataset,
    detailed: bool = False,
    outlier_method: str = "iqr",
) -> ProfileResult:
    """Analyze the structure and quality of a dataset.

    Args:
        dataset: Rows as mappings, or a DataFrame.
        detailed: Also detect outliers per numeric column and compute a
            correlation matrix over the numeric columns.
        outlier_method: ``"iqr"`` or ``"zscore"`` (detailed mode only).

    Returns:
        ProfileResult with per-column type, missing count, cardinality and
        numeric statistics, plus the share of non-missing cells as
        ``quality_score``.
    """
    if outlier_method not in ("iqr", "zscore"):
        raise ValueError(f"Unknown outlier method '{outlier_method}'. Use 'iqr' or 'zscore'.")

    row_count = len(dataset)
    profiles = {
        col: _profile_column(extract(dataset, col), detailed, outlier_method)
        for col in columns(dataset)
    }

    matrix: Optional[Dict[Hashable, Dict[Hashable, Optional[float]]]] = None
    if detailed:
        numeric_cols = [
            c for c, p in profiles.items()
            if p.type in NUMERIC_TYPES and p.mean is not None
        ]
        matrix = correlation_matrix(dataset, numeric_cols) if len(numeric_cols) > 1 else {}

    result = ProfileResult(
        row_count=row_count,
        column_count=len(profiles),
        columns=profiles,
        missing_values={col: p.missing for col, p in profiles.items()},
        quality_score=_quality_score(row_count, profiles),
        correlation_matrix=matrix,
    )

    logger.info(
        "Profiled %d rows x %d columns (quality score %.4f)",
        row_count, len(profiles), result.quality_score,
    )
    return result


def profile_file(source_path: str, **opts: Any) -> ProfileResult:
    """Load a CSV file and profile it.

    Args:
        source_path: Path to the CSV file.
        **opts: Passed through to ``profile``.
    """
    return profile(load_records(source_path), **opts)
