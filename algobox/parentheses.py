"""Bracket balancing, generation and expression grouping."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from functools import lru_cache

_PAIRS = {")": "(", "]": "[", "}": "{"}

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def is_valid(s: str) -> bool:
    """Return whether every bracket in ``s`` is closed by its partner in order.

    Any character other than a matching closer stays on the stack, so text
    that is not a bracket makes the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses, in sorted order."""
    length = 2 * n

    def build(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if len(prefix) == length:
            yield prefix
            return
        if opened < n:
            yield from build(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from build(prefix + ")", opened, closed + 1)

    return list(build("", 0, 0))


def min_add_to_make_valid(s: str) -> int:
    """Return how many characters are left unmatched after pairing ``(`` with ``)``."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == "(" and ch == ")":
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def min_swaps(s: str) -> int:
    """Return the fewest swaps that balance a string of ``[`` and ``]``."""
    opened = 0
    unmatched = 0
    for ch in s:
        if ch == "[":
            opened += 1
        elif opened > 0:
            opened -= 1
        else:
            unmatched += 1
    return (unmatched + 1) // 2


def diff_ways_to_compute(expression: str) -> list[int]:
    """Return the value of every way to parenthesise an expression of ``+ - *``.

    Raises ValueError when an operand is missing or not a number.
    """

    @lru_cache(maxsize=None)
    def ways(expr: str) -> tuple[int, ...]:
        results: list[int] = []
        for index, ch in enumerate(expr):
            combine = _OPERATORS.get(ch)
            if combine is None:
                continue
            left = ways(expr[:index])
            right = ways(expr[index + 1:])
            results.extend(combine(a, b) for a in left for b in right)
        if not results:
            results.append(int(expr))
        return tuple(results)

    return list(ways(expression))