import math
import random

import pytest

from contestkit.codeforces import (
    digit_sum,
    max_points,
    min_distinct_after_changes,
    next_above_max,
    next_gcd_sum,
)


def test_max_points_single_odd():
    assert max_points([1]) == 0


def test_max_points_single_even():
    assert max_points([2]) == 1


def test_max_points_empty():
    assert max_points([]) == 0


@pytest.mark.parametrize(
    "values", [[1, 2], [2, 4, 6], [1000000000, 999999999, 999999998, 999999997]]
)
def test_max_points_order_independent(values):
    shuffled = values[:]
    random.Random(7).shuffle(shuffled)
    assert max_points(shuffled) == max_points(values)
    assert max_points(list(reversed(values))) == max_points(values)


@pytest.mark.parametrize("values", [[2, 4, 6], [3, 1, 4, 1, 5, 9, 2, 6], [8, 8, 8]])
def test_max_points_bounds(values):
    points = max_points(values)
    assert 1 <= points <= len(values)


def test_max_points_rejects_non_positive():
    with pytest.raises(ValueError):
        max_points([0, 2])


@pytest.mark.parametrize("n, m", [(1, 1), (3, 5), (10, 2), (1000000000, 7)])
def test_next_above_max(n, m):
    result = next_above_max(n, m)
    assert result == next_above_max(m, n)
    assert result - 1 == (n if n >= m else m)


def test_min_distinct_example():
    assert min_distinct_after_changes([1, 1, 2, 2, 3], 1) == 2


def test_min_distinct_no_changes():
    values = [4, 4, 7, 9, 9, 9]
    assert min_distinct_after_changes(values, 0) == len(set(values))


def test_min_distinct_enough_changes():
    values = [4, 4, 7, 9, 9, 9]
    assert min_distinct_after_changes(values, len(values)) == 1


def test_min_distinct_all_equal():
    assert min_distinct_after_changes([5, 5, 5], 0) == 1


def test_min_distinct_empty():
    assert min_distinct_after_changes([], 3) == 1


@pytest.mark.parametrize("k", range(0, 8))
def test_min_distinct_monotone_in_k(k):
    values = [1, 2, 2, 3, 3, 3, 4]
    result = min_distinct_after_changes(values, k)
    assert 1 <= result <= len(set(values))
    assert min_distinct_after_changes(values, k + 1) <= result


@pytest.mark.parametrize("x", [0, -5])
def test_digit_sum_non_positive(x):
    assert digit_sum(x) == 0


@pytest.mark.parametrize("x", range(1, 10))
def test_digit_sum_single_digit(x):
    assert digit_sum(x) == x


@pytest.mark.parametrize("x", [7, 123, 98765, 1000000000000000000])
def test_digit_sum_ignores_trailing_zeros(x):
    assert digit_sum(x * 10) == digit_sum(x)
    assert digit_sum(x * 1000) == digit_sum(x)


def test_next_gcd_sum_already_valid():
    assert next_gcd_sum(75) == 75


def test_next_gcd_sum_example():
    assert next_gcd_sum(31) == 33


@pytest.mark.parametrize("x", [1, 11, 31, 75, 1000, 999999999999])
def test_next_gcd_sum_is_smallest(x):
    result = next_gcd_sum(x)
    assert result >= x
    assert math.gcd(result, digit_sum(result)) > 1
    assert all(math.gcd(y, digit_sum(y)) == 1 for y in range(x, result))