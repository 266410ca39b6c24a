"""Interval and timetable problems solved with sorting and heaps."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

_MINUTES_PER_DAY = 1440


def smallest_chair(times: Sequence[Sequence[int]], target_friend: int) -> int:
    """Return the chair number the target friend sits on.

    Each friend takes the lowest free chair on arrival and frees it on leaving;
    a chair freed at a moment is free to anyone arriving at that moment.
    """
    target_arrival = times[target_friend][0]
    occupied: list[tuple[int, int]] = []
    free: list[int] = []
    next_chair = 0
    for arrival, departure in sorted((t[0], t[1]) for t in times):
        while occupied and occupied[0][0] <= arrival:
            heapq.heappush(free, heapq.heappop(occupied)[1])
        if free:
            chair = heapq.heappop(free)
        else:
            chair = next_chair
            next_chair += 1
        if arrival == target_arrival:
            return chair
        heapq.heappush(occupied, (departure, chair))
    return -1


def max_two_events(events: Iterable[Sequence[int]]) -> int:
    """Return the best total value of at most two events that do not overlap.

    Event ends are inclusive, so one event may start only after the other ends.
    """
    points: list[tuple[int, bool, int]] = []
    for start, end, value in events:
        points.append((start, True, value))
        points.append((end + 1, False, value))
    points.sort()
    best_total = 0
    best_finished = 0
    for _, starting, value in points:
        if starting:
            best_total = max(best_total, best_finished + value)
        else:
            best_finished = max(best_finished, value)
    return best_total


def most_booked(n: int, meetings: Iterable[Sequence[int]]) -> int:
    """Return the room that held the most meetings, or -1 if there were none.

    Meetings take the lowest free room; when none is free a meeting waits for
    the earliest room to free and keeps its duration. Ties go to the lowest room.
    """
    busy: list[tuple[int, int]] = []
    free = list(range(n))
    heapq.heapify(free)
    counts = [0] * n
    for start, end in sorted((m[0], m[1]) for m in meetings):
        while busy and busy[0][0] <= start:
            heapq.heappush(free, heapq.heappop(busy)[1])
        if free:
            room = heapq.heappop(free)
            heapq.heappush(busy, (end, room))
        else:
            freed_at, room = heapq.heappop(busy)
            heapq.heappush(busy, (freed_at + end - start, room))
        counts[room] += 1
    best_room = -1
    best_count = 0
    for room, count in enumerate(counts):
        if count > best_count:
            best_room, best_count = room, count
    return best_room


def min_groups(intervals: Iterable[Sequence[int]]) -> int:
    """Return the fewest groups holding inclusive intervals that do not intersect."""
    ends: list[int] = []
    for start, end in sorted((i[0], i[1]) for i in intervals):
        if ends and ends[0] < start:
            heapq.heapreplace(ends, end)
        else:
            heapq.heappush(ends, end)
    return len(ends)


def _minutes(point: str) -> int:
    return int(point[0:2]) * 60 + int(point[3:5])


def find_min_difference(time_points: Iterable[str]) -> int:
    """Return the fewest minutes between any two ``HH:MM`` times on a 24-hour clock."""
    minutes = sorted(_minutes(point) for point in time_points)
    if not minutes:
        raise ValueError("time_points must not be empty")
    gaps = [later - earlier for earlier, later in zip(minutes, minutes[1:])]
    gaps.append(_MINUTES_PER_DAY - minutes[-1] + minutes[0])
    return min(gaps)


def smallest_range(nums: Sequence[Sequence[int]]) -> list[int]:
    """Return the narrowest ``[low, high]`` holding a number from each sorted list.

    Of ranges equally narrow, the one with the lowest start wins.
    """
    if not nums:
        raise ValueError("nums must hold at least one list")
    if any(not values for values in nums):
        raise ValueError("every list must be non-empty")
    heap = [(values[0], row, 0) for row, values in enumerate(nums)]
    heapq.heapify(heap)
    high = max(values[0] for values in nums)
    best: list[int] | None = None
    while heap:
        low, row, index = heapq.heappop(heap)
        if best is None or high - low < best[1] - best[0]:
            best = [low, high]
        if index + 1 >= len(nums[row]):
            break
        following = nums[row][index + 1]
        heapq.heappush(heap, (following, row, index + 1))
        high = max(high, following)
    assert best is not None
    return best