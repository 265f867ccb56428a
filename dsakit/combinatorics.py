"""Quadruplet sums, permutations and the fractional knapsack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All unique quadruplets of ``nums`` summing to ``target``.

    Each quadruplet is in ascending order and the quadruplets come out in
    ascending lexicographic order.
    """
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    i = 0
    while i < n:
        j = i + 1
        while j < n:
            need = target - values[i] - values[j]
            left, right = j + 1, n - 1
            while left < right:
                pair = values[left] + values[right]
                if pair < need:
                    left += 1
                elif pair > need:
                    right -= 1
                else:
                    quad = [values[i], values[j], values[left], values[right]]
                    result.append(quad)
                    while left < right and values[left] == quad[2]:
                        left += 1
                    while left < right and values[right] == quad[3]:
                        right -= 1
            while j + 1 < n and values[j + 1] == values[j]:
                j += 1
            j += 1
        while i + 1 < n and values[i + 1] == values[i]:
            i += 1
        i += 1
    return result


def next_permutation(nums: Iterable[Any]) -> list:
    """The lexicographically next arrangement of ``nums``.

    The last arrangement wraps around to the first (ascending order).
    The input is not modified.
    """
    values = list(nums)
    pivot = next(
        (i for i in range(len(values) - 2, -1, -1) if values[i] < values[i + 1]),
        None,
    )
    if pivot is None:
        return values[::-1]
    swap_with = next(
        i for i in range(len(values) - 1, pivot, -1) if values[i] > values[pivot]
    )
    values[pivot], values[swap_with] = values[swap_with], values[pivot]
    values[pivot + 1 :] = reversed(values[pivot + 1 :])
    return values


def _permute(values: list, start: int) -> Iterator[list]:
    if start == len(values) - 1:
        yield list(values)
        return
    for i in range(start, len(values)):
        values[start], values[i] = values[i], values[start]
        yield from _permute(values, start + 1)
        values[start], values[i] = values[i], values[start]


def permutations(items: Iterable[Any]) -> Iterator[list]:
    """Every arrangement of ``items``, generated by swapping each element to the front.

    An empty input yields nothing.
    """
    values = list(items)
    if not values:
        return
    yield from _permute(values, 0)


def fractional_knapsack(
    weights: Sequence[float], profits: Sequence[float], capacity: float
) -> float:
    """Greatest profit when items may be taken in fractions, best ratio first."""
    if len(weights) != len(profits):
        raise ValueError("weights and profits differ in length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    items = sorted(
        zip(weights, profits), key=lambda item: item[1] / item[0], reverse=True
    )
    remaining = capacity
    total = 0.0
    for weight, profit in items:
        if weight > remaining:
            total += profit * remaining / weight
            break
        total += profit
        remaining -= weight
    return total