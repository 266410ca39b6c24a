"""Number puzzles on decimal digits and bits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _lexical(n: int) -> Iterator[int]:
    current = 1
    for _ in range(n):
        yield current
        if current * 10 <= n:
            current *= 10
        else:
            while current % 10 == 9 or current >= n:
                current //= 10
            current += 1


def lexical_order(n: int) -> list[int]:
    """Return 1..n sorted as strings."""
    return list(_lexical(n)) if n >= 1 else []


def _count_with_prefix(prefix: int, n: int) -> int:
    count = 0
    current, following = prefix, prefix + 1
    while current <= n:
        count += min(following, n + 1) - current
        current *= 10
        following *= 10
    return count


def find_kth_number(n: int, k: int) -> int:
    """Return the k-th number (1-based) of 1..n in lexicographic order."""
    if not 1 <= k <= n:
        raise ValueError("k must be between 1 and n")
    current = 1
    k -= 1
    while k > 0:
        steps = _count_with_prefix(current, n)
        if steps <= k:
            current += 1
            k -= steps
        else:
            current *= 10
            k -= 1
    return current


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many bits differ between two non-negative integers."""
    if start < 0 or goal < 0:
        raise ValueError("numbers must not be negative")
    return bin(start ^ goal).count("1")


def _prefixes(number: int) -> Iterator[str]:
    text = str(number)
    for length in range(1, len(text) + 1):
        yield text[:length]


def longest_common_prefix(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Return the most leading digits shared by a number of ``arr1`` and one of ``arr2``."""
    first = list(arr1)
    second = list(arr2)
    if any(number < 0 for number in first + second):
        raise ValueError("numbers must not be negative")
    known = {prefix for number in first if number for prefix in _prefixes(number)}
    return max(
        (len(prefix) for number in second if number for prefix in _prefixes(number) if prefix in known),
        default=0,
    )