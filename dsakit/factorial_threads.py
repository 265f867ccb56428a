"""Factorials computed on worker threads."""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor


def factorial(n: int) -> int:
    """Product of 1..n; 1 when ``n`` is below 1."""
    return math.prod(range(1, n + 1))


def sum_of_factorials(n: int) -> int:
    """Sum of k! for k = 1..n."""
    total = 0
    term = 1
    for k in range(1, n + 1):
        term *= k
        total += term
    return total


def run_threads(n: int) -> tuple[int, int]:
    """Compute ``factorial(n)`` and then ``sum_of_factorials(n)``, each on its own thread."""
    with ThreadPoolExecutor(max_workers=1) as pool:
        fact = pool.submit(factorial, n).result()
        total = pool.submit(sum_of_factorials, n).result()
    return fact, total