"""String helpers: palindromes, reversal, run removal and name counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same backwards, ignoring letter case."""
    folded = text.upper()
    return folded == folded[::-1]


def reverse(text: str) -> str:
    """``text`` with its characters in reverse order."""
    return text[::-1]


def remove_k_duplicates(text: str, k: int) -> str:
    """Repeatedly delete runs of ``k`` equal adjacent characters.

    A run is removed the moment a repeated character brings its length to
    ``k``; removals may join neighbouring runs, which are then counted together.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    runs: list[list] = []
    for char in text:
        if not runs or runs[-1][0] != char:
            runs.append([char, 1])
        else:
            runs[-1][1] += 1
            if runs[-1][1] == k:
                runs.pop()
    return "".join(char * count for char, count in runs)


def count_keys(names: Iterable[str]) -> Counter:
    """How many times each name occurs; names are case-sensitive."""
    return Counter(names)