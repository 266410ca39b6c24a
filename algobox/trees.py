"""Operations on binary trees."""

from __future__ import annotations

from typing import Optional

from algobox.nodes import ListNode, TreeNode


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return whether the tree is a mirror image of itself."""
    if root is None:
        return True
    pending = [(root.left, root.right)]
    while pending:
        left, right = pending.pop()
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
        pending.append((left.left, right.right))
        pending.append((right.left, left.right))
    return True


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap every node's children in place and return the root."""
    if root is None:
        return None
    stack = [root]
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return root


def _matches_downward(head: Optional[ListNode], node: Optional[TreeNode]) -> bool:
    if head is None:
        return True
    if node is None or node.val != head.val:
        return False
    return _matches_downward(head.next, node.left) or _matches_downward(head.next, node.right)


def is_sub_path(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    """Return whether the list's values appear along some downward path of the tree."""
    if head is None:
        return True
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if _matches_downward(head, node):
            return True
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return False


def reverse_odd_levels(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Reverse the values on every odd level of a perfect binary tree, in place."""
    if root is None:
        return None
    stack = [(root.left, root.right, 0)]
    while stack:
        left, right, level = stack.pop()
        if left is None or right is None:
            continue
        if level % 2 == 0:
            left.val, right.val = right.val, left.val
        stack.append((left.left, right.right, level + 1))
        stack.append((left.right, right.left, level + 1))
    return root