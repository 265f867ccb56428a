import itertools
import math

import pytest

from dsakit.combinatorics import (
    four_sum,
    fractional_knapsack,
    next_permutation,
    permutations,
)


def test_four_sum_known_example():
    assert four_sum([1, 0, -1, 0, -2, 2], 0) == [
        [-2, -1, 1, 2],
        [-2, 0, 0, 2],
        [-1, 0, 0, 1],
    ]


@pytest.mark.parametrize(
    "nums, target",
    [([1, 0, -1, 0, -2, 2], 0), ([2, 2, 2, 2, 2], 8), ([5, -3, 7, 1, 1, 0, -2, 4], 6)],
)
def test_four_sum_results_are_valid_and_unique(nums, target):
    result = four_sum(nums, target)
    for quad in result:
        assert sum(quad) == target
        assert quad == sorted(quad)
        for value in set(quad):
            assert quad.count(value) <= nums.count(value)
    assert len({tuple(q) for q in result}) == len(result)


def test_four_sum_repeated_values_give_one_quadruplet():
    assert four_sum([2, 2, 2, 2, 2], 8) == [[2, 2, 2, 2]]


def test_four_sum_too_short():
    assert four_sum([1, 2, 3], 6) == []


def test_next_permutation_walks_lexicographic_order():
    start = [1, 2, 3, 4]
    expected = [list(p) for p in itertools.permutations(start)]
    current = start
    seen = [current]
    for _ in range(len(expected) - 1):
        current = next_permutation(current)
        seen.append(current)
    assert seen == expected


def test_next_permutation_wraps_and_keeps_input():
    last = [3, 2, 1]
    assert next_permutation(last) == sorted(last)
    assert last == [3, 2, 1]


def test_permutations_cover_all_arrangements():
    items = [1, 2, 3, 4]
    result = list(permutations(items))
    assert len(result) == math.factorial(len(items))
    assert {tuple(p) for p in result} == set(itertools.permutations(items))
    assert result[0] == items


def test_permutations_empty():
    assert list(permutations([])) == []


def test_fractional_knapsack_classic():
    assert fractional_knapsack([10, 20, 30], [60, 100, 120], 50) == pytest.approx(240)


def test_fractional_knapsack_everything_fits():
    profits = [5, 7, 3]
    assert fractional_knapsack([1, 2, 3], profits, 100) == pytest.approx(sum(profits))


def test_fractional_knapsack_zero_capacity():
    assert fractional_knapsack([1, 2], [3, 4], 0) == 0


def test_fractional_knapsack_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        fractional_knapsack([1, 2], [3], 5)