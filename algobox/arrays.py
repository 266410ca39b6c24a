"""Array puzzles: pair lookups, in-place rearrangements, ranks and running maxima."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two numbers adding up to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        wanted = target - value
        if wanted in seen:
            return [seen[wanted], index]
        seen[value] = index
    return []


def max_profit(prices: Iterable[int]) -> int:
    """Return the best gain from buying on one day and selling on a later one."""
    best = 0
    highest: int | None = None
    for price in reversed(list(prices)):
        highest = price if highest is None else max(highest, price)
        best = max(best, highest - price)
    return best


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def wiggle_sort(nums: list[int]) -> None:
    """Rearrange in place so that ``nums[0] < nums[1] > nums[2] < ...`` where possible.

    The largest values fill the odd positions in descending order, the rest
    fill the even positions in descending order.
    """
    descending = sorted(nums, reverse=True)
    odd_slots = len(nums) // 2
    nums[1::2] = descending[:odd_slots]
    nums[0::2] = descending[odd_slots:]


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return, in increasing order, the numbers of 1..n missing from ``nums``."""
    size = len(nums)
    present = set(nums)
    if any(not 1 <= value <= size for value in present):
        raise ValueError("every value must lie between 1 and the length of nums")
    return [number for number in range(1, size + 1) if number not in present]


def max_chunks_to_sorted(arr: Iterable[int]) -> int:
    """Return how many pieces a permutation of 0..n-1 splits into so sorting each sorts all."""
    chunks = 0
    highest: int | None = None
    for index, value in enumerate(arr):
        highest = value if highest is None else max(highest, value)
        if highest == index:
            chunks += 1
    return chunks


def max_width_ramp(nums: Sequence[int]) -> int:
    """Return the widest ``j - i`` with ``i < j`` and ``nums[i] <= nums[j]``, or 0."""
    stack: list[int] = []
    for index, value in enumerate(nums):
        if not stack or nums[stack[-1]] > value:
            stack.append(index)
    best = 0
    for index in range(len(nums) - 1, -1, -1):
        while stack and nums[stack[-1]] <= nums[index]:
            best = max(best, index - stack.pop())
    return best


def array_rank_transform(arr: Sequence[int]) -> list[int]:
    """Replace each value by its rank among the distinct values, starting at 1."""
    ranks = {value: rank for rank, value in enumerate(sorted(set(arr)), start=1)}
    return [ranks[value] for value in arr]


def xor_queries(arr: Iterable[int], queries: Iterable[Sequence[int]]) -> list[int]:
    """Return the xor of ``arr[start..end]`` (inclusive) for each query."""
    prefix = [0, *accumulate(arr, xor)]
    return [prefix[end + 1] ^ prefix[start] for start, end in queries]


def check_if_exist(arr: Iterable[int]) -> bool:
    """Return whether some value is exactly twice another value at a different position."""
    values = list(arr)
    counts = Counter(values)
    for value in values:
        if value == 0:
            if counts[0] >= 2:
                return True
            continue
        if value * 2 in counts or (value % 2 == 0 and value // 2 in counts):
            return True
    return False


def final_prices(prices: Sequence[int]) -> list[int]:
    """Discount each price by the first later price not above it."""
    result = list(prices)
    waiting: list[int] = []
    for index, price in enumerate(prices):
        while waiting and prices[waiting[-1]] >= price:
            result[waiting.pop()] -= price
        waiting.append(index)
    return result


def get_final_state(nums: Sequence[int], k: int, multiplier: int) -> list[int]:
    """Multiply the smallest value (the first, on ties) by ``multiplier``, ``k`` times."""
    result = list(nums)
    if k > 0 and not result:
        raise ValueError("nums must not be empty")
    heap = [(value, index) for index, value in enumerate(result)]
    heapq.heapify(heap)
    for _ in range(k):
        value, index = heapq.heappop(heap)
        result[index] = value * multiplier
        heapq.heappush(heap, (result[index], index))
    return result


def find_maximum_score(nums: Sequence[int]) -> int:
    """Return the best score walking to the last index, paying the start value per step."""
    if not nums:
        raise ValueError("nums must not be empty")
    highest = nums[0]
    score = 0
    for value in nums[1:]:
        score += highest
        highest = max(highest, value)
    return score