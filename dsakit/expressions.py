"""Bracket matching and evaluation of single-digit postfix expressions."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_balanced(expression: str) -> bool:
    """Whether every (), [] and {} in ``expression`` is properly matched and nested.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and ``+ - * /``.

    Division truncates toward zero. Whitespace is ignored. Malformed input
    raises ValueError; division by zero raises ZeroDivisionError.
    """
    stack: list[int] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isdigit():
            stack.append(int(char))
            continue
        if char not in "+-*/":
            raise ValueError(f"unexpected character {char!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        if char == "+":
            stack.append(left + right)
        elif char == "-":
            stack.append(left - right)
        elif char == "*":
            stack.append(left * right)
        else:
            stack.append(_truncating_divide(left, right))
    if len(stack) != 1:
        raise ValueError("expression does not reduce to a single value")
    return stack[0]