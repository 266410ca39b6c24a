"""Operations on singly linked lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from math import gcd
from typing import Optional

from algobox.nodes import ListNode, build_list, list_values


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; on ties the second list goes first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Return a new list with the values rotated ``k`` places to the right."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or k == 0 or head.next is None:
        return head
    values = deque(list_values(head))
    if k > len(values):
        k %= len(values)
    values.rotate(k)
    return build_list(values)


def reverse_between(head: Optional[ListNode], left: int, right: int) -> Optional[ListNode]:
    """Reverse, in place, the nodes from position ``left`` to ``right`` (1-based)."""
    if left < 1 or right < left:
        raise ValueError("positions must satisfy 1 <= left <= right")
    dummy = ListNode(0, head)
    prev = dummy
    for _ in range(left - 1):
        prev = prev.next
    curr = prev.next
    for _ in range(right - left):
        moved = curr.next
        curr.next = moved.next
        moved.next = prev.next
        prev.next = moved
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return its new head."""
    prev: Optional[ListNode] = None
    while head is not None:
        following = head.next
        head.next = prev
        prev = head
        head = following
    return prev


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Cut a list into ``k`` consecutive parts whose sizes differ by at most one.

    Earlier parts are the larger ones; parts with no nodes are None.
    """
    if k < 1:
        raise ValueError("k must be positive")
    length = sum(1 for _ in head) if head is not None else 0
    base, extra = divmod(length, k)
    parts: list[Optional[ListNode]] = []
    curr = head
    for index in range(k):
        if curr is None:
            parts.append(None)
            continue
        parts.append(curr)
        size = base + (1 if index < extra else 0)
        for _ in range(size - 1):
            curr = curr.next
        rest = curr.next
        curr.next = None
        curr = rest
    return parts


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def _spiral(m: int, n: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, m - 1, 0, n - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                yield bottom, col
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                yield row, left
            left += 1


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """Lay the list's values clockwise into an m x n grid; unfilled cells are -1."""
    grid = [[-1] * n for _ in range(m)]
    nodes: Iterable[ListNode] = head if head is not None else ()
    for (row, col), node in zip(_spiral(m, n), nodes):
        grid[row][col] = node.val
    return grid


def insert_greatest_common_divisors(head: Optional[ListNode]) -> Optional[ListNode]:
    """Insert between each pair of adjacent nodes a node holding their gcd."""
    node = head
    while node is not None and node.next is not None:
        node.next = ListNode(gcd(node.val, node.next.val), node.next)
        node = node.next.next
    return head


def modified_list(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new list without the values that appear in ``nums``."""
    excluded = set(nums)
    return build_list(value for value in list_values(head) if value not in excluded)