"""Binary searches over sorted data and over answers."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, Sequence


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def _least_fitting(high: int, fits: Callable[[int], bool]) -> int:
    """Return the least value in 1..high that fits, or ``high`` if none does."""
    low, best = 1, high
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def min_eating_speed(piles: Iterable[int], h: int) -> int:
    """Return the slowest eating speed that finishes every pile within ``h`` hours."""
    values = list(piles)
    if not values:
        raise ValueError("piles must not be empty")
    return _least_fitting(max(values), lambda speed: sum(-(-pile // speed) for pile in values) <= h)


def minimum_size(nums: Iterable[int], max_operations: int) -> int:
    """Return the smallest possible largest bag after at most ``max_operations`` splits."""
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    if max_operations < 0:
        raise ValueError("max_operations must not be negative")
    return _least_fitting(
        max(values), lambda size: sum((bag - 1) // size for bag in values) <= max_operations
    )