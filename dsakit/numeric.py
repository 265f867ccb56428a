"""Number-theory and matrix helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence

_LIMB = 10**9


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent`` modulo ``modulus`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    while exponent:
        if exponent % 2:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent //= 2
    return result


def _cofactor_expansion(rows: list[list]) -> float:
    if len(rows) == 1:
        return rows[0][0]
    total = 0
    for col, value in enumerate(rows[0]):
        minor = [row[:col] + row[col + 1 :] for row in rows[1:]]
        sign = 1 if col % 2 == 0 else -1
        total += sign * value * _cofactor_expansion(minor)
    return total


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Determinant by cofactor expansion along the first row."""
    rows = [list(row) for row in matrix]
    if not rows or any(len(row) != len(rows) for row in rows):
        raise ValueError("determinant needs a non-empty square matrix")
    return _cofactor_expansion(rows)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points in the plane."""
    return math.hypot(x2 - x1, y2 - y1)


def factorial_digits(n: int) -> str:
    """Decimal digits of ``n!``, for any size of ``n``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    limbs = [1]  # little-endian, base 10**9
    for factor in range(2, n + 1):
        carry = 0
        for index, limb in enumerate(limbs):
            carry, limbs[index] = divmod(limb * factor + carry, _LIMB)
        while carry:
            carry, low = divmod(carry, _LIMB)
            limbs.append(low)
    return str(limbs[-1]) + "".join(f"{limb:09d}" for limb in reversed(limbs[:-1]))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def matrix_multiply(
    first: Sequence[Sequence[float]], second: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Product of two matrices; the inner dimensions must agree."""
    a = [list(row) for row in first]
    b = [list(row) for row in second]
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of the first matrix must equal rows of the second")
    width = len(b[0]) if b else 0
    if any(len(row) != width for row in b):
        raise ValueError("second matrix rows differ in length")
    columns = list(zip(*b)) if b else []
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]