import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    cocktail_sort,
    count_inversions,
    heap_sort,
    insertion_sort,
    merge_sort,
    merge_sorted,
    quick_sort,
    radix_sort,
    selection_sort,
)


def _random_lists():
    rng = random.Random(1234)
    cases = [[], [7], [2, 1], [1, 2, 3], [3, 2, 1], [5, 5, 5, 5]]
    for size in (5, 17, 64):
        cases.append([rng.randrange(100) for _ in range(size)])
    return cases


@pytest.mark.parametrize("data", _random_lists())
def test_sorts_match_builtin(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert cocktail_sort(data) == expected
    assert quick_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert radix_sort(data) == expected


def test_sorts_leave_input_untouched():
    data = [12, 11, 13, 5, 6, 7]
    original = list(data)
    expected = [5, 6, 7, 11, 12, 13]
    assert bubble_sort(data) == expected
    assert cocktail_sort(data) == expected
    assert quick_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert radix_sort(data) == expected
    assert data == original


@pytest.mark.parametrize(
    "sort",
    [bubble_sort, cocktail_sort, quick_sort, insertion_sort, selection_sort, heap_sort, merge_sort],
)
def test_comparison_sorts_handle_negatives_and_strings(sort):
    assert sort([3, -1, 0, -7, 2]) == [-7, -1, 0, 2, 3]
    assert sort(["pear", "apple", "fig"]) == ["apple", "fig", "pear"]


def test_quick_sort_large_sorted_input_does_not_recurse_deeply():
    data = list(range(3000))
    assert quick_sort(data) == data


def test_radix_sort_rejects_negatives():
    with pytest.raises(ValueError):
        radix_sort([3, -2, 1])


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

        def __gt__(self, other):
            return self.pair[0] > other.pair[0]

    result = [k.pair for k in merge_sort(Keyed(p) for p in pairs)]
    assert result == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]


@pytest.mark.parametrize(
    "first, second",
    [([1, 3, 5], [2, 4, 6]), ([], [1, 2]), ([1, 2], []), ([1, 1, 4], [1, 9])],
)
def test_merge_sorted_matches_sorted_concatenation(first, second):
    assert merge_sorted(first, second) == sorted(first + second)


def test_merge_sorted_empty_inputs():
    assert merge_sorted([], []) == []


def test_count_inversions_sorted_is_zero():
    assert count_inversions([1, 2, 3, 4, 5]) == 0


def test_count_inversions_reversed_is_all_pairs():
    assert count_inversions(range(10, 0, -1)) == 45


def test_count_inversions_example():
    assert count_inversions([2, 4, 1, 3, 5]) == 3


def test_count_inversions_does_not_mutate():
    data = [5, 3, 1]
    assert count_inversions(data) == 3
    assert data == [5, 3, 1]