"""Tests for column extraction and CSV loading."""

import math

import pandas as pd

from datacheck_core import (
    column_exists,
    columns,
    count_non_null,
    create_baseline,
    detect,
    extract,
    load_records,
    profile,
)
from datacheck_core._columns import is_null, is_numeric, non_null


class TestExtract:
    def test_extract_in_row_order(self):
        rows = [{"age": 25}, {"name": "Bob"}, {"age": 35}]
        assert extract(rows, "age") == [25, None, 35]

    def test_non_null_drops_missing_and_nan(self):
        rows = [{"x": 1.0}, {"x": float("nan")}, {"x": None}, {"x": 4.0}]
        assert non_null(rows, "x") == [1.0, 4.0]

    def test_empty_dataset(self):
        assert extract([], "age") == []
        assert columns([]) == []

    def test_dataframe(self):
        df = pd.DataFrame({"a": [1, 2], "b": ["x", None]})
        assert extract(df, "a") == [1, 2]
        assert count_non_null(df, "b") == 1
        assert columns(df) == ["a", "b"]

    def test_dataframe_missing_column(self):
        df = pd.DataFrame({"a": [1, 2]})
        assert extract(df, "z") == [None, None]
        assert column_exists(df, "z") is False
        assert column_exists(df.iloc[0:0], "a") is False

    def test_dataframe_is_not_converted_to_records(self, monkeypatch):
        calls = []
        original = pd.DataFrame.to_dict

        def counting_to_dict(self, *args, **kwargs):
            calls.append(1)
            return original(self, *args, **kwargs)

        monkeypatch.setattr(pd.DataFrame, "to_dict", counting_to_dict)
        df = pd.DataFrame({f"c{i}": list(range(20)) for i in range(20)})
        detect(df, create_baseline(df))
        profile(df, detailed=True)
        assert calls == []


class TestColumns:
    def test_union_in_first_seen_order(self):
        rows = [{"age": 25, "name": "Alice"}, {"age": 30, "email": "bob@example.com"}]
        assert columns(rows) == ["age", "name", "email"]

    def test_column_exists(self):
        rows = [{"age": 25}, {"name": "Bob"}]
        assert column_exists(rows, "age") is True
        assert column_exists(rows, "email") is False
        assert column_exists([], "age") is False

    def test_count_non_null(self):
        assert count_non_null([{"a": 25}, {"a": None}, {"a": 30}], "a") == 2


class TestValueChecks:
    def test_is_null(self):
        assert is_null(None)
        assert is_null(float("nan"))
        assert is_null(pd.NA)
        assert not is_null(0)
        assert not is_null("")
        assert not is_null([None])

    def test_is_numeric(self):
        assert is_numeric(3)
        assert is_numeric(2.5)
        assert not is_numeric(True)
        assert not is_numeric("3")


class TestLoadRecords:
    def test_empty_cells_become_none(self, customers_csv):
        records = load_records(customers_csv)
        assert len(records) == 10
        assert records[4]["balance"] is None
        assert math.isclose(records[0]["balance"], 1500.0)
        assert records[0]["name"] == "Alice Johnson"
