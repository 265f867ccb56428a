"""Classic comparison and distribution sorts, merging and inversion counting.

Every sort takes any iterable and returns a new sorted list; the input is
never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _swap(values: list, i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]


def bubble_sort(items: Iterable[Any]) -> list:
    """Bubble sort that stops early once a pass makes no swap."""
    result = list(items)
    n = len(result)
    for done in range(n):
        swapped = False
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                _swap(result, j, j + 1)
                swapped = True
        if not swapped:
            break
    return result


def cocktail_sort(items: Iterable[Any]) -> list:
    """Cocktail shaker sort: alternating forward and backward bubble passes."""
    result = list(items)
    start, end = 0, len(result) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if result[i] > result[i + 1]:
                _swap(result, i, i + 1)
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if result[i] > result[i + 1]:
                _swap(result, i, i + 1)
                swapped = True
        start += 1
    return result


def _partition_last(values: list, low: int, high: int) -> int:
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            _swap(values, i, j)
    _swap(values, i + 1, high)
    return i + 1


def quick_sort(items: Iterable[Any]) -> list:
    """Quicksort with the last element of each range as the pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition_last(result, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return result


def insertion_sort(items: Iterable[Any]) -> list:
    """Insertion sort: shift larger elements right and drop each key in place."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(items: Iterable[Any]) -> list:
    """Selection sort: repeatedly move the smallest remaining element forward."""
    result = list(items)
    n = len(result)
    for i in range(n):
        smallest = min(range(i, n), key=result.__getitem__)
        _swap(result, i, smallest)
    return result


def _sift_down(values: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        _swap(values, root, largest)
        root = largest


def heap_sort(items: Iterable[Any]) -> list:
    """Heap sort using an in-place max-heap."""
    result = list(items)
    n = len(result)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, root)
    for end in range(n - 1, 0, -1):
        _swap(result, 0, end)
        _sift_down(result, end, 0)
    return result


def _merge_counting(left: list, right: list) -> tuple[list, int]:
    """Merge two sorted lists, preferring the left on ties, counting inversions."""
    merged = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _merge_sort_counting(values: list) -> tuple[list, int]:
    if len(values) <= 1:
        return list(values), 0
    mid = (len(values) - 1) // 2 + 1
    left, left_count = _merge_sort_counting(values[:mid])
    right, right_count = _merge_sort_counting(values[mid:])
    merged, cross = _merge_counting(left, right)
    return merged, left_count + right_count + cross


def merge_sort(items: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    return _merge_sort_counting(list(items))[0]


def count_inversions(items: Iterable[Any]) -> int:
    """Number of pairs (i, j) with i < j and items[i] > items[j]."""
    return _merge_sort_counting(list(items))[1]


def radix_sort(items: Iterable[int]) -> list[int]:
    """LSD radix sort on decimal digits; only non-negative integers are accepted."""
    result = list(items)
    if not result:
        return result
    if any(value < 0 for value in result):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(result)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // exp) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
        exp *= 10
    return result


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list:
    """Merge two ascending sequences; on ties the element of ``second`` goes first."""
    a, b = list(first), list(second)
    merged = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            merged.append(a[i])
            i += 1
        else:
            merged.append(b[j])
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged