"""Tests for the descriptive statistics module."""

import random

import pytest

from datacheck_core import stats


class TestExtremes:
    def test_min_max(self):
        assert stats.min_value([5, 2, 8, 1, 9]) == 1
        assert stats.max_value([5, 2, 8, 1, 9]) == 9

    def test_single_element(self):
        assert stats.min_value([42]) == 42
        assert stats.max_value([42]) == 42

    def test_empty(self):
        assert stats.min_value([]) is None
        assert stats.max_value([]) is None


class TestMean:
    def test_integers(self):
        assert stats.mean([1, 2, 3, 4, 5]) == 3.0
        assert stats.mean([10, 20, 30]) == 20.0

    def test_floats(self):
        assert stats.mean([1.5, 2.5]) == pytest.approx(2.0)

    def test_empty(self):
        assert stats.mean([]) is None

    def test_constant_float_sample(self):
        assert stats.mean([0.1, 0.1, 0.1]) == 0.1


class TestMedian:
    def test_odd_length(self):
        assert stats.median([1, 2, 3, 4, 5]) == 3

    def test_even_length(self):
        assert stats.median([1, 2, 3, 4]) == 2.5

    def test_unsorted_input(self):
        values = [3, 1, 2]
        assert stats.median(values) == 2
        assert values == [3, 1, 2]  # not mutated

    def test_single_and_empty(self):
        assert stats.median([7]) == 7
        assert stats.median([]) is None


class TestVariability:
    def test_stdev(self):
        assert stats.stdev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)

    def test_variance(self):
        assert stats.variance([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(4.0)

    def test_identical_values(self):
        assert stats.stdev([5, 5, 5, 5]) == 0.0
        assert stats.variance([5, 5, 5, 5]) == 0.0
        assert stats.variance([0.1] * 7) == 0.0

    def test_single_element(self):
        assert stats.stdev([42]) == 0.0
        assert stats.variance([42]) == 0.0

    def test_empty(self):
        assert stats.stdev([]) is None
        assert stats.variance([]) is None

    def test_large_finite_values(self):
        assert stats.stdev([1e200, -1e200]) == pytest.approx(1e200)
        assert stats.stdev([1e300, 3e300]) == pytest.approx(1e300)
        # 1e400 is not a float
        assert stats.variance([1e200, -1e200]) is None

    def test_large_mean_stays_finite(self):
        assert stats.mean([1e308, 1e308, -1e308]) == pytest.approx(1e308 / 3)


class TestQuantile:
    def test_interpolation(self):
        values = list(range(1, 11))
        assert stats.quantile(values, 0.5) == pytest.approx(5.5)
        assert stats.quantile(values, 0.25) == pytest.approx(3.25)
        assert stats.quantile(values, 0.75) == pytest.approx(7.75)

    def test_edges(self):
        values = list(range(1, 11))
        assert stats.quantile(values, 0.0) == 1
        assert stats.quantile(values, 1.0) == 10

    def test_integral_rank_returns_order_statistic(self):
        assert stats.quantile([3, 1, 2], 0.5) == 2

    def test_empty(self):
        assert stats.quantile([], 0.5) is None

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="within"):
            stats.quantile([1, 2, 3], 1.5)


class TestSummary:
    def test_summary(self):
        result = stats.summary(list(range(1, 11)))
        assert result.count == 10
        assert result.min == 1
        assert result.max == 10
        assert result.mean == pytest.approx(5.5)
        assert result.median == pytest.approx(5.5)
        assert result.q25 == pytest.approx(3.25)
        assert result.q75 == pytest.approx(7.75)

    def test_empty_summary(self):
        result = stats.summary([])
        assert result.count == 0
        assert result.mean is None
        assert result.stdev is None
        assert result.q25 is None


class TestProperties:
    def test_mean_within_bounds_and_stdev_non_negative(self):
        rng = random.Random(13)
        samples = [
            [0.1, 0.1, 0.1],
            [1e10, 1.0, -1e10],
            [3.3] * 9,
        ]
        samples += [
            [rng.uniform(-1e6, 1e6) for _ in range(rng.randint(1, 50))]
            for _ in range(100)
        ]
        for xs in samples:
            assert stats.min_value(xs) <= stats.mean(xs) <= stats.max_value(xs)
            assert stats.stdev(xs) >= 0.0
