"""Greedy scores computed with priority queues."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from math import isqrt


def max_kelements(nums: Iterable[int], k: int) -> int:
    """Take the largest value ``k`` times, each time replacing it by a third, rounded up."""
    heap = [-num for num in nums]
    if not heap and k > 0:
        raise ValueError("nums must not be empty")
    heapq.heapify(heap)
    score = 0
    for taken in range(k):
        value = -heap[0]
        score += value
        if value == 1:
            score += k - 1 - taken
            break
        heapq.heapreplace(heap, -((value + 2) // 3))
    return score


def pick_gifts(gifts: Iterable[int], k: int) -> int:
    """Replace the richest pile by its integer square root ``k`` times; return what remains."""
    heap = [-gift for gift in gifts]
    if not heap and k > 0:
        raise ValueError("gifts must not be empty")
    heapq.heapify(heap)
    for _ in range(k):
        heapq.heapreplace(heap, -isqrt(-heap[0]))
    return -sum(heap)


def find_score(nums: Iterable[int]) -> int:
    """Repeatedly take the smallest unmarked value, marking it and its neighbours; sum what was taken.

    Ties go to the lower index.
    """
    values = list(nums)
    marked = [False] * len(values)
    score = 0
    for index in sorted(range(len(values)), key=lambda i: (values[i], i)):
        if marked[index]:
            continue
        score += values[index]
        for neighbour in (index - 1, index, index + 1):
            if 0 <= neighbour < len(values):
                marked[neighbour] = True
    return score