"""Small array helpers: maximum, swapping and counting up."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def maximum(values: Iterable[Any]) -> Any:
    """Largest of ``values``; an empty input raises ValueError."""
    items = list(values)
    if not items:
        raise ValueError("maximum of an empty sequence")
    return max(items)


def swap_arrays(first: Iterable[Any], second: Iterable[Any]) -> tuple[list, list]:
    """Exchange the contents of two equally long sequences."""
    a, b = list(first), list(second)
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")
    return b, a


def swap_pair(a: Any, b: Any) -> tuple[Any, Any]:
    """The two values in exchanged order."""
    return b, a


def count_up(start: int, stop: int = 100) -> Iterator[int]:
    """Integers from ``start`` up to and including ``stop``."""
    yield from range(start, stop + 1)