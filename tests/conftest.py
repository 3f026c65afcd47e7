"""Shared test fixtures for datacheck-core."""

import csv
from statistics import NormalDist

import pytest


def _normal_grid(mu, sigma, n):
    """Deterministic sample of ``n`` points spread over a normal distribution."""
    dist = NormalDist(mu, sigma)
    return [dist.inv_cdf((i + 0.5) / n) for i in range(n)]


@pytest.fixture
def customers_csv(tmp_path):
    """Create a 10-row customer CSV with one missing balance."""
    path = tmp_path / "customers.csv"
    rows = [
        {"id": "1", "name": "Alice Johnson", "city": "New York", "balance": "1500.00"},
        {"id": "2", "name": "Bob Smith", "city": "Chicago", "balance": "2300.50"},
        {"id": "3", "name": "Charlie Brown", "city": "Houston", "balance": "850.75"},
        {"id": "4", "name": "Diana Prince", "city": "Phoenix", "balance": "3200.00"},
        {"id": "5", "name": "Eve Williams", "city": "San Antonio", "balance": ""},
        {"id": "6", "name": "Frank Castle", "city": "Dallas", "balance": "4500.00"},
        {"id": "7", "name": "Grace Hopper", "city": "San Jose", "balance": "2750.30"},
        {"id": "8", "name": "Hank Pym", "city": "Austin", "balance": "990.00"},
        {"id": "9", "name": "Ivy League", "city": "Columbus", "balance": "1800.60"},
        {"id": "10", "name": "Jack Ryan", "city": "Chicago", "balance": "3100.45"},
    ]
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=rows[0].keys())
        writer.writeheader()
        writer.writerows(rows)
    return str(path)


@pytest.fixture
def mixed_rows():
    """Reference rows with one numeric and one categorical column."""
    return [
        {"age": 25, "status": "active"},
        {"age": 30, "status": "pending"},
        {"age": 35, "status": "active"},
    ]


@pytest.fixture
def value_rows():
    """100 rows with ``value`` running 1..100."""
    return [{"value": i} for i in range(1, 101)]


@pytest.fixture
def normal_grid():
    """Factory for deterministic normal samples: ``normal_grid(mu, sigma, n)``."""
    return _normal_grid
