"""Subarray and pairing problems: prefix sums, windows and greedy checks."""

from __future__ import annotations

import math
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate


def can_arrange(arr: Iterable[int], k: int) -> bool:
    """Return whether the values split into pairs whose sums are divisible by ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    residues = Counter(value % k for value in arr)
    for residue, count in residues.items():
        partner = (k - residue) % k
        if partner == residue:
            if count % 2:
                return False
        elif residues.get(partner, 0) != count:
            return False
    return True


def min_subarray(nums: Sequence[int], p: int) -> int:
    """Return the shortest subarray to remove so the rest sums to a multiple of ``p``.

    Removing the whole array is not allowed; -1 when nothing shorter works.
    """
    if p < 1:
        raise ValueError("p must be positive")
    target = sum(nums) % p
    if target == 0:
        return 0
    size = len(nums)
    seen = {0: -1}
    best = size
    running = 0
    for index, value in enumerate(nums):
        running = (running + value) % p
        wanted = (running - target) % p
        if wanted in seen:
            best = min(best, index - seen[wanted])
        seen[running] = index
    return -1 if best == size else best


def missing_rolls(rolls: Sequence[int], mean: int, n: int) -> list[int]:
    """Return ``n`` die rolls making the overall mean ``mean``, or an empty list."""
    if n < 1:
        raise ValueError("n must be positive")
    remaining = mean * (len(rolls) + n) - sum(rolls)
    if remaining < n or remaining > 6 * n:
        return []
    base, extra = divmod(remaining, n)
    return [base + 1] * extra + [base] * (n - extra)


def longest_subarray(nums: Iterable[int]) -> int:
    """Return the length of the longest run of the largest value."""
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    target = max(values)
    best = run = 0
    for value in values:
        run = run + 1 if value == target else 0
        best = max(best, run)
    return best


def divide_players(skill: Iterable[int]) -> int:
    """Pair players so every team has equal total skill; return the sum of the products, or -1."""
    ordered = sorted(skill)
    teams = len(ordered) // 2
    if teams == 0:
        raise ValueError("at least two players are needed")
    total = sum(ordered)
    if total % teams:
        return -1
    target = total // teams
    chemistry = 0
    for low, high in zip(ordered[:teams], reversed(ordered[-teams:])):
        if low + high != target:
            return -1
        chemistry += low * high
    return chemistry


def max_count(banned: Iterable[int], n: int, max_sum: int) -> int:
    """Return how many distinct unbanned numbers of 1..n fit, smallest first, under ``max_sum``."""
    excluded = set(banned)
    total = 0
    count = 0
    for number in range(1, n + 1):
        if number in excluded:
            continue
        if total + number > max_sum:
            break
        total += number
        count += 1
    return count


def continuous_subarrays(nums: Sequence[int]) -> int:
    """Count subarrays whose largest and smallest values differ by at most 2."""
    highs: deque[int] = deque()
    lows: deque[int] = deque()
    left = 0
    count = 0
    for right, value in enumerate(nums):
        while highs and nums[highs[-1]] < value:
            highs.pop()
        highs.append(right)
        while lows and nums[lows[-1]] > value:
            lows.pop()
        lows.append(right)
        while nums[highs[0]] - nums[lows[0]] > 2:
            if highs[0] < lows[0]:
                left = highs.popleft() + 1
            else:
                left = lows.popleft() + 1
        count += right - left + 1
    return count


def maximum_beauty(nums: Iterable[int], k: int) -> int:
    """Return the most equal values reachable when each value may move by up to ``k``."""
    ordered = sorted(nums)
    best = 0
    right = 0
    for left, low in enumerate(ordered):
        while right < len(ordered) and ordered[right] - low <= 2 * k:
            right += 1
        best = max(best, right - left)
    return best


def is_array_special(nums: Sequence[int], queries: Iterable[Sequence[int]]) -> list[bool]:
    """For each inclusive range, return whether neighbouring values always differ in parity."""
    clashes = [0, *accumulate(int(a % 2 == b % 2) for a, b in zip(nums, nums[1:]))]
    return [clashes[end] == clashes[start] for start, end in queries]


def max_subarray_sum(nums: Iterable[int], k: int) -> int:
    """Return the largest sum of a subarray whose length is a multiple of ``k``, or -1."""
    if k < 1:
        raise ValueError("k must be positive")
    prefix = [0, *accumulate(nums)]
    lowest: list[float] = [math.inf] * k
    best: int | None = None
    for index, total in enumerate(prefix):
        slot = index % k
        if index >= k:
            candidate = total - lowest[slot]
            if best is None or candidate > best:
                best = int(candidate)
        lowest[slot] = min(lowest[slot], total)
    return -1 if best is None else best