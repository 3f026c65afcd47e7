"""Shared I/O helpers."""

from pathlib import Path
from typing import Any, Dict, List

import pandas as pd


def read_csv(file_path: str) -> pd.DataFrame:
    """Read a CSV file into a DataFrame."""
    if not Path(file_path).exists():
        raise FileNotFoundError(f"Data file not found: {file_path}")
    return pd.read_csv(file_path)


def load_records(file_path: str) -> List[Dict[str, Any]]:
    """Read a CSV file into a list of row records.

    Empty cells come back as ``None`` rather than ``NaN``.
    """
    df = read_csv(file_path)
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")
