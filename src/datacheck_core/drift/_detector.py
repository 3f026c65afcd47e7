"""Drift detection of a dataset against a baseline."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, Hashable, List, Tuple, Union

from .._columns import Dataset, column_exists, is_numeric, non_null
from ._metrics import ks_test, psi
from ._types import (
    Baseline,
    CategoricalColumnBaseline,
    ColumnMismatchError,
    DriftMethod,
    DriftResult,
    NumericColumnBaseline,
)

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.05


def _numeric_drift(
    column: Hashable, current: List[Any], baseline: NumericColumnBaseline
) -> Tuple[float, float]:
    for value in current:
        if not is_numeric(value):
            raise ColumnMismatchError(
                f"Column '{column}' has a numeric baseline but holds non-numeric value {value!r}"
            )
    return ks_test(baseline.values, current)


def _categorical_drift(
    column: Hashable, current: List[Any], baseline: CategoricalColumnBaseline
) -> float:
    if not current:
        return 0.0
    try:
        frequencies = Counter(current)
    except TypeError as exc:
        raise ColumnMismatchError(f"Column '{column}' holds unhashable values: {exc}") from exc

    current_dist = {cat: count / len(current) for cat, count in frequencies.items()}
    return psi(baseline.proportions(), current_dist)


def detect(
    dataset: Dataset,
    baseline: Baseline,
    threshold: float = DEFAULT_THRESHOLD,
    method: Union[DriftMethod, str] = DriftMethod.AUTO,
) -> DriftResult:
    """Compare a dataset against a baseline, column by column.

    Numeric baseline columns are scored with the two-sample KS statistic
    against the stored reference sample; categorical columns are scored with
    PSI between the two frequency distributions. A column drifts when its
    score is strictly above ``threshold``.

    ``method`` only labels the result: the formula for each column follows
    its baseline kind, and the one actually used is reported in
    ``details["column_methods"]``.

    Columns that cannot be scored are reported in ``column_errors`` instead
    of aborting the batch, together with any column the baseline itself
    failed to snapshot. An all-null column scores ``0.0``.

    Args:
        dataset: Current rows as mappings, or a DataFrame.
        baseline: Baseline from ``create_baseline``.
        threshold: Drift score threshold.
        method: Label for the result (``auto``, ``ks``, ``psi``, ``chi_square``).

    Returns:
        A fresh ``DriftResult``.
    """
    method = DriftMethod(method)

    drift_scores: Dict[Hashable, float] = {}
    column_errors: Dict[Hashable, str] = dict(baseline.column_errors)
    column_methods: Dict[Hashable, str] = {}
    p_values: Dict[Hashable, float] = {}
    sample_sizes: Dict[Hashable, Dict[str, int]] = {}

    for column, column_baseline in baseline.items():
        if not column_exists(dataset, column):
            column_errors[column] = f"Column '{column}' not found in dataset"
            logger.warning("Drift check skipped column '%s': not found in dataset", column)
            continue

        current = non_null(dataset, column)
        try:
            if isinstance(column_baseline, NumericColumnBaseline):
                score, p_value = _numeric_drift(column, current, column_baseline)
                p_values[column] = p_value
                column_methods[column] = DriftMethod.KS.value
                reference_size = len(column_baseline.values)
            elif isinstance(column_baseline, CategoricalColumnBaseline):
                score = _categorical_drift(column, current, column_baseline)
                column_methods[column] = DriftMethod.PSI.value
                reference_size = column_baseline.total
            else:
                raise TypeError(f"Unsupported baseline column type: {type(column_baseline).__name__}")
        except ColumnMismatchError as exc:
            column_errors[column] = str(exc)
            logger.warning("Drift check skipped column '%s': %s", column, exc)
            continue

        drift_scores[column] = score
        sample_sizes[column] = {"baseline": reference_size, "current": len(current)}
        logger.debug("Column '%s' drift score %.4f (%s)", column, score, column_methods[column])

    result = DriftResult.build(
        drift_scores,
        threshold,
        method,
        details={
            "column_methods": column_methods,
            "p_values": p_values,
            "sample_sizes": sample_sizes,
        },
        column_errors=column_errors,
    )

    logger.info(
        "Drift check over %d columns: %d drifted, %d failed (threshold=%s)",
        len(baseline), len(result.columns_drifted), len(column_errors), threshold,
    )
    return result


detect_drift = detect
