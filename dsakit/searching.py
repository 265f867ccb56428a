"""Binary search over ascending sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Index of ``target`` in ascending ``items``, or None when it is absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if target < value:
            high = mid - 1
        else:
            low = mid + 1
    return None


def count_at_most(items: Iterable[Any], target: Any) -> int:
    """How many of ``items`` are less than or equal to ``target``."""
    return bisect.bisect_right(sorted(items), target)