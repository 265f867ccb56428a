"""One's-complement checksums and runs of zero bits."""

from __future__ import annotations

from collections.abc import Iterable


def checksum(values: Iterable[int]) -> int:
    """Sender checksum: bitwise complement of the sum of ``values``."""
    return ~sum(values)


def verify_checksum(values: Iterable[int], sender_checksum: int) -> bool:
    """Whether ``values`` agree with the sender's checksum (receiver complement is zero)."""
    return ~(sum(values) + sender_checksum) == 0


def longest_zero_run(number: int) -> int:
    """Length of the longest run of zeros in the binary form of ``number``; 0 for 0."""
    if number < 0:
        raise ValueError("number must not be negative")
    digits = format(number, "b") if number > 0 else ""
    return max(len(run) for run in digits.split("1"))


def numbers_with_longest_zero_run(numbers: Iterable[int]) -> list[int]:
    """The numbers sharing the longest zero run, in reverse input order."""
    values = list(numbers)
    if not values:
        return []
    runs = [longest_zero_run(value) for value in values]
    best = max(runs)
    return [value for value, run in zip(reversed(values), reversed(runs)) if run == best]