"""Baseline construction from a reference dataset."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, Hashable, List, Union

from .. import stats
from .._columns import Dataset, columns, is_numeric, non_null
from ._types import (
    Baseline,
    CategoricalColumnBaseline,
    ColumnMismatchError,
    NumericColumnBaseline,
)

logger = logging.getLogger(__name__)

NUMERIC_SAMPLE_SIZE = 10


def _is_numeric_column(values: List[Any]) -> bool:
    """Classify from the first few non-null values; an empty column is categorical."""
    if not values:
        return False
    return all(is_numeric(v) for v in values[:NUMERIC_SAMPLE_SIZE])


def _column_baseline(
    column: Hashable, values: List[Any]
) -> Union[NumericColumnBaseline, CategoricalColumnBaseline]:
    if _is_numeric_column(values):
        for position, value in enumerate(values):
            if not is_numeric(value):
                raise ColumnMismatchError(
                    f"Column '{column}' was classified as numeric from its first "
                    f"{NUMERIC_SAMPLE_SIZE} values but holds non-numeric value "
                    f"{value!r} at non-null position {position}"
                )
        return NumericColumnBaseline(
            values=tuple(values),
            mean=stats.mean(values),
            stdev=stats.stdev(values),
        )

    try:
        frequencies = Counter(values)
    except TypeError as exc:
        raise ColumnMismatchError(f"Column '{column}' holds unhashable values: {exc}") from exc
    return CategoricalColumnBaseline(
        frequencies=frequencies,
        total=len(values),
    )


def create_baseline(dataset: Dataset) -> Baseline:
    """Build a baseline snapshot of a reference dataset.

    Every column seen in any row is classified once: numeric when its first
    10 non-null values are all real numbers, categorical otherwise. Numeric
    columns keep their full sample with mean and stdev; categorical columns
    keep a frequency table.

    A column classified as numeric that holds a non-numeric value further
    down, or a categorical column of unhashable values, is left out of the
    snapshot and reported in ``Baseline.column_errors``. The remaining
    columns are still built.

    Args:
        dataset: Reference rows as mappings, or a DataFrame.

    Returns:
        Immutable ``Baseline``.
    """
    snapshot = {}
    column_errors: Dict[Hashable, str] = {}
    for column in columns(dataset):
        try:
            column_baseline = _column_baseline(column, non_null(dataset, column))
        except ColumnMismatchError as exc:
            column_errors[column] = str(exc)
            logger.warning("Baseline skipped column '%s': %s", column, exc)
            continue
        snapshot[column] = column_baseline
        logger.debug("Baseline column '%s' classified as %s", column, column_baseline.kind.value)

    numeric = sum(1 for c in snapshot.values() if isinstance(c, NumericColumnBaseline))
    logger.info(
        "Built baseline over %d rows: %d numeric, %d categorical, %d failed columns",
        len(dataset), numeric, len(snapshot) - numeric, len(column_errors),
    )

    return Baseline(columns=snapshot, column_errors=column_errors, row_count=len(dataset))
