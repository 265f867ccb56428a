"""Timing of a first-element-pivot quicksort on sorted, random and reversed data."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_SIZES = (1000, 10000, 100000)
WORST_CASE_BASE = 111111


@dataclass(frozen=True)
class BenchmarkRow:
    """Elapsed microseconds for one input size."""

    size: int
    best: int
    average: int
    worst: int


def _partition_first(values: list, start: int, end: int) -> int:
    pivot = values[start]
    i = start + 1
    for j in range(start + 1, end + 1):
        if values[j] < pivot:
            values[i], values[j] = values[j], values[i]
            i += 1
    values[i - 1], values[start] = values[start], values[i - 1]
    return i - 1


def _quicksort_in_place(values: list) -> None:
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            pos = _partition_first(values, start, end)
            pending.append((pos + 1, end))
            pending.append((start, pos - 1))


def first_pivot_quicksort(items: Iterable) -> list:
    """Return a sorted copy, partitioning around the first element of each range."""
    values = list(items)
    _quicksort_in_place(values)
    return values


def _time_sort(values: list) -> int:
    started = time.perf_counter_ns()
    _quicksort_in_place(values)
    return (time.perf_counter_ns() - started) // 1000


def best_case(n: int) -> int:
    """Microseconds to sort 0..n-1 in ascending order."""
    return _time_sort(list(range(n)))


def average_case(n: int) -> int:
    """Microseconds to sort n random integers."""
    return _time_sort([random.randrange(2**31) for _ in range(n)])


def worst_case(n: int) -> int:
    """Microseconds to sort n integers counting down from 111111."""
    return _time_sort(list(range(WORST_CASE_BASE, WORST_CASE_BASE - n, -1)))


def benchmark(sizes: Iterable[int] = DEFAULT_SIZES) -> list[BenchmarkRow]:
    """Time all three cases for each size."""
    return [
        BenchmarkRow(size, best_case(size), average_case(size), worst_case(size))
        for size in sizes
    ]


def format_table(results: Iterable[BenchmarkRow]) -> str:
    """Lay out benchmark rows as a tab-separated table."""
    lines = ["\tBest Case\tAverage Case\tWorst Case\n"]
    for row in results:
        cells = "".join(
            f"\t{value}" if value >= 10_000_000 else f"\t{value}\t"
            for value in (row.best, row.average, row.worst)
        )
        lines.append(f"{row.size}{cells}\n")
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time quicksort on three kinds of input.")
    parser.add_argument(
        "sizes",
        nargs="*",
        type=int,
        default=list(DEFAULT_SIZES),
        help="input sizes to time",
    )
    args = parser.parse_args(argv)
    print(format_table(benchmark(args.sizes)), end="")
    return 0