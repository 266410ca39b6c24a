"""Singly linked list and binary tree nodes, with builders for tests and callers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

_END = object()


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[ListNode]:
        """Iterate over this node and every node after it."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({[node.val for node in self]!r})"


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def __repr__(self) -> str:
        return f"TreeNode({tree_values(self)!r})"


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list:
    """Return the values of the list starting at ``head``."""
    if head is None:
        return []
    return [node.val for node in head]


def build_tree(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_values(root: Optional[TreeNode]) -> list:
    """Return the level-order values of a tree, None for missing children."""
    values: list = []
    queue: deque[Optional[TreeNode]] = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        if node is None:
            values.append(None)
            continue
        values.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while values and values[-1] is None:
        values.pop()
    return values