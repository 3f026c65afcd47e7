"""Shared result types for the datacheck-core library.

All library functions return Python values or Pydantic models.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# -- Statistics types --

class StatSummary(BaseModel):
    """Descriptive statistics of a numeric sample. Absent statistics are None."""
    count: int
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    median: Optional[float] = None
    stdev: Optional[float] = None
    variance: Optional[float] = None
    q25: Optional[float] = None
    q75: Optional[float] = None


# -- Outlier types --

class IqrOutlierReport(BaseModel):
    """Outliers found with Tukey's fences, plus the quartiles behind them.

    Fence fields are None for an empty sample.
    """
    method: Literal["iqr"] = "iqr"
    outliers: List[float] = Field(default_factory=list)
    outlier_indices: List[int] = Field(default_factory=list)
    outlier_count: int = 0
    q1: Optional[float] = None
    q3: Optional[float] = None
    iqr: Optional[float] = None
    lower_fence: Optional[float] = None
    upper_fence: Optional[float] = None


class ZScoreOutlierReport(BaseModel):
    """Outliers found by absolute z-score, plus the z-score of every value.

    ``z_scores`` is aligned with the input sample and empty when the
    standard deviation is zero or undefined.
    """
    method: Literal["zscore"] = "zscore"
    outliers: List[float] = Field(default_factory=list)
    outlier_indices: List[int] = Field(default_factory=list)
    outlier_count: int = 0
    mean: Optional[float] = None
    stdev: Optional[float] = None
    threshold: float = 3.0
    z_scores: List[float] = Field(default_factory=list)


OutlierReport = Union[IqrOutlierReport, ZScoreOutlierReport]


# -- Profiler types --

class ColumnProfile(BaseModel):
    """Profile of a single column."""
    type: str
    missing: int = 0
    cardinality: int = 0
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    median: Optional[float] = None
    stdev: Optional[float] = None
    outliers: Optional[OutlierReport] = None


class ProfileResult(BaseModel):
    """Result of profiling a dataset."""
    row_count: int
    column_count: int
    columns: Dict[Any, ColumnProfile]
    missing_values: Dict[Any, int]
    quality_score: float
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    correlation_matrix: Optional[Dict[Any, Dict[Any, Optional[float]]]] = None
