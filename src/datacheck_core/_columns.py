"""Column access over in-memory datasets.

A dataset is either a sequence of row mappings or a ``pandas.DataFrame``.
Rows may be sparse: a row without a given key simply contributes ``None``
for that column.

Public API:
    extract         — All values of a column, one per row
    non_null        — Column values with nulls dropped
    columns         — Every column name seen across all rows
    column_exists   — Whether any row carries the column
    count_non_null  — Number of non-null values in a column
    is_null         — Null test shared by every module
    is_numeric      — Real-number test (booleans excluded)
"""

from __future__ import annotations

import numbers
from typing import Any, Dict, Hashable, List, Mapping, Sequence, Union

import pandas as pd

Record = Mapping[Hashable, Any]
Dataset = Union[Sequence[Record], pd.DataFrame]


def is_null(value: Any) -> bool:
    """Return True for ``None``, ``NaN``, ``pd.NA`` and ``pd.NaT``."""
    if value is None:
        return True
    if pd.api.types.is_scalar(value):
        return bool(pd.isna(value))
    return False


def is_numeric(value: Any) -> bool:
    """Return True for real numbers. Booleans are not numbers here."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def extract(dataset: Dataset, column: Hashable) -> List[Any]:
    """Extract every value of ``column``, in row order.

    Rows that lack the column yield ``None``. A DataFrame column is read
    directly without converting the frame to records.
    """
    if isinstance(dataset, pd.DataFrame):
        if column not in dataset.columns:
            return [None] * len(dataset)
        return dataset[column].tolist()
    return [row.get(column) for row in dataset]


def non_null(dataset: Dataset, column: Hashable) -> List[Any]:
    """Extract the non-null values of ``column``, in row order."""
    return [v for v in extract(dataset, column) if not is_null(v)]


def columns(dataset: Dataset) -> List[Hashable]:
    """Return every column name seen across all rows, in first-seen order."""
    if isinstance(dataset, pd.DataFrame):
        return list(dataset.columns)

    seen: Dict[Hashable, None] = {}
    for row in dataset:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def column_exists(dataset: Dataset, column: Hashable) -> bool:
    """Return True if at least one row carries ``column``."""
    if isinstance(dataset, pd.DataFrame):
        return column in dataset.columns and not dataset.empty
    return any(column in row for row in dataset)


def count_non_null(dataset: Dataset, column: Hashable) -> int:
    """Count the non-null values of ``column``."""
    return len(non_null(dataset, column))
