"""Small container designs: frequency tracker, calendars, bounded deque and stack."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections import deque


class AllOne:
    """Count keys and report one with the highest or lowest count.

    Ties on the highest count go to the greatest key; ties on the lowest
    count go to the smallest key.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def inc(self, key: str) -> None:
        """Add one to the count of ``key``."""
        self._counts[key] = self._counts.get(key, 0) + 1

    def dec(self, key: str) -> None:
        """Take one from the count of ``key``, forgetting it at zero; unknown keys are ignored."""
        count = self._counts.get(key, 0)
        if count > 1:
            self._counts[key] = count - 1
        else:
            self._counts.pop(key, None)

    def get_max_key(self) -> str:
        """Return a key with the highest count, or an empty string."""
        if not self._counts:
            return ""
        return max(self._counts.items(), key=lambda item: (item[1], item[0]))[0]

    def get_min_key(self) -> str:
        """Return a key with the lowest count, or an empty string."""
        if not self._counts:
            return ""
        return min(self._counts.items(), key=lambda item: (item[1], item[0]))[0]


class MyCalendar:
    """Book half-open intervals ``[start, end)`` that never overlap."""

    def __init__(self) -> None:
        self._bookings: list[tuple[int, int]] = []

    def book(self, start: int, end: int) -> bool:
        """Book the interval if it overlaps no earlier booking; return whether it was booked."""
        position = bisect_left(self._bookings, (start, end))
        if position < len(self._bookings) and self._bookings[position][0] < end:
            return False
        if position > 0 and self._bookings[position - 1][1] > start:
            return False
        insort(self._bookings, (start, end))
        return True


class MyCalendarTwo:
    """Book half-open intervals so that no moment is covered three times."""

    def __init__(self) -> None:
        self._deltas: dict[int, int] = {}

    def _shift(self, start: int, end: int, amount: int) -> None:
        self._deltas[start] = self._deltas.get(start, 0) + amount
        self._deltas[end] = self._deltas.get(end, 0) - amount

    def book(self, start: int, end: int) -> bool:
        """Book the interval unless it would cause a triple booking; return whether it was booked."""
        self._shift(start, end, 1)
        active = 0
        for point in sorted(self._deltas):
            active += self._deltas[point]
            if active > 2:
                self._shift(start, end, -1)
                return False
        return True


class CircularDeque:
    """A double-ended queue of fixed capacity."""

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = k
        self._items: deque[int] = deque()

    def insert_front(self, value: int) -> bool:
        """Add at the front; return False when full."""
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        """Add at the back; return False when full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        """Remove from the front; return False when empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        """Remove from the back; return False when empty."""
        if self.is_empty():
            return False
        self._items.pop()
        return True

    def get_front(self) -> int:
        """Return the front item, or -1 when empty."""
        return self._items[0] if self._items else -1

    def get_rear(self) -> int:
        """Return the back item, or -1 when empty."""
        return self._items[-1] if self._items else -1

    def is_empty(self) -> bool:
        """Return whether the deque holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """Return whether the deque is at capacity."""
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)


class CustomStack:
    """A bounded stack that can add to its bottom elements in one step."""

    def __init__(self, max_size: int) -> None:
        self._max_size = max_size
        self._items: list[int] = []

    def push(self, x: int) -> None:
        """Push ``x`` unless the stack is full."""
        if len(self._items) < self._max_size:
            self._items.append(x)

    def pop(self) -> int:
        """Pop and return the top item, or -1 when empty."""
        return self._items.pop() if self._items else -1

    def increment(self, k: int, val: int) -> None:
        """Add ``val`` to each of the bottom ``k`` items."""
        for index in range(min(k, len(self._items))):
            self._items[index] += val

    def __len__(self) -> int:
        return len(self._items)