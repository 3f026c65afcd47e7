"""Pydantic models for the drift detection module."""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import (
    Annotated,
    Any,
    Dict,
    ItemsView,
    List,
    Literal,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    WrapSerializer,
    model_validator,
)

K = TypeVar("K")
V = TypeVar("V")


def _freeze(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


def _thaw(value: Mapping, handler: SerializerFunctionWrapHandler) -> Any:
    return handler(dict(value))


# Stored behind a read-only proxy; dumped as a plain dict.
ReadOnlyMapping = Annotated[Mapping[K, V], AfterValidator(_freeze), WrapSerializer(_thaw)]


def _empty() -> Mapping:
    return MappingProxyType({})


class ColumnMismatchError(ValueError):
    """A column's values do not fit the shape its baseline expects."""


# -- Enums -------------------------------------------------------------------


class DriftMethod(str, Enum):
    """Label attached to a drift result.

    Scoring is decided per column by its baseline kind: numeric columns
    always use the KS statistic and categorical columns always use PSI.
    """

    AUTO = "auto"
    KS = "ks"
    PSI = "psi"
    CHI_SQUARE = "chi_square"


class ColumnKind(str, Enum):
    """Kind a baseline column was classified as."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


# -- Baseline models ---------------------------------------------------------


class NumericColumnBaseline(BaseModel):
    """Snapshot of a numeric reference column.

    The full sample is kept because the KS comparison needs the empirical
    distribution, not just its moments.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[ColumnKind.NUMERIC] = ColumnKind.NUMERIC
    values: Tuple[float, ...]
    mean: float
    stdev: float


class CategoricalColumnBaseline(BaseModel):
    """Snapshot of a categorical reference column as a frequency table."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ColumnKind.CATEGORICAL] = ColumnKind.CATEGORICAL
    frequencies: ReadOnlyMapping[Any, int] = Field(default_factory=_empty)
    total: int = 0

    def proportions(self) -> Dict[Any, float]:
        """Frequency table normalised to proportions."""
        if self.total == 0:
            return {}
        return {cat: count / self.total for cat, count in self.frequencies.items()}


ColumnBaseline = Annotated[
    Union[NumericColumnBaseline, CategoricalColumnBaseline],
    Field(discriminator="kind"),
]


class Baseline(BaseModel):
    """Frozen statistical snapshot of a reference dataset.

    Read it like a mapping from column name to column snapshot. Column kinds
    are fixed when the baseline is built and never re-inferred. Every nested
    mapping is a read-only view, so one baseline can be shared across any
    number of ``detect`` calls without copying.

    Columns that could not be snapshotted are left out of ``columns`` and
    listed with the reason in ``column_errors``.
    """

    model_config = ConfigDict(frozen=True)

    columns: ReadOnlyMapping[Any, ColumnBaseline] = Field(default_factory=_empty)
    column_errors: ReadOnlyMapping[Any, str] = Field(default_factory=_empty)
    row_count: int = 0
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def __getitem__(self, column: Any) -> Union[NumericColumnBaseline, CategoricalColumnBaseline]:
        return self.columns[column]

    def __contains__(self, column: Any) -> bool:
        return column in self.columns

    def __len__(self) -> int:
        return len(self.columns)

    def items(self) -> ItemsView:
        return self.columns.items()

    @property
    def column_names(self) -> List[Any]:
        return list(self.columns)


# -- Result model ------------------------------------------------------------


class DriftResult(BaseModel):
    """Outcome of comparing one dataset against a baseline.

    A column is drifted when its score is strictly above ``threshold``;
    ``drifted`` is true exactly when at least one column drifted. Columns
    that could not be scored (absent, or holding non-numeric values against
    a numeric baseline) are listed in ``column_errors`` and carry no score.
    """

    model_config = ConfigDict(frozen=True)

    drifted: bool
    columns_drifted: List[Any]
    drift_scores: Dict[Any, float]
    method: DriftMethod
    threshold: float
    details: Dict[str, Any] = Field(default_factory=dict)
    column_errors: Dict[Any, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_consistency(self) -> "DriftResult":
        expected = [c for c, score in self.drift_scores.items() if score > self.threshold]
        if self.columns_drifted != expected:
            raise ValueError("columns_drifted must list exactly the columns scoring above threshold")
        if self.drifted != bool(self.columns_drifted):
            raise ValueError("drifted must be true exactly when a column drifted")
        return self

    @classmethod
    def build(
        cls,
        drift_scores: Dict[Any, float],
        threshold: float,
        method: DriftMethod,
        details: Optional[Dict[str, Any]] = None,
        column_errors: Optional[Dict[Any, str]] = None,
    ) -> "DriftResult":
        """Derive the drifted columns from the scores and build the result."""
        columns_drifted = [c for c, score in drift_scores.items() if score > threshold]
        return cls(
            drifted=bool(columns_drifted),
            columns_drifted=columns_drifted,
            drift_scores=drift_scores,
            method=method,
            threshold=threshold,
            details=details or {},
            column_errors=column_errors or {},
        )

    @property
    def failed(self) -> bool:
        """True when at least one baseline column could not be scored."""
        return bool(self.column_errors)
