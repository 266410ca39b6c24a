import pytest

from algobox.nodes import ListNode, TreeNode, build_list, build_tree, list_values, tree_values


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4, 5], [5, 5, -1, 0]])
def test_list_round_trip(values):
    assert list_values(build_list(values)) == values


def test_empty_list_is_none():
    assert build_list([]) is None
    assert list_values(None) == []


def test_list_links_in_order():
    head = build_list([10, 20, 30])
    assert head.val == 10
    assert head.next.val == 20
    assert head.next.next.val == 30
    assert head.next.next.next is None


def test_list_node_iteration_yields_nodes():
    head = build_list([4, 5, 6])
    nodes = list(head)
    assert [node.val for node in nodes] == [4, 5, 6]
    assert nodes[0] is head


@pytest.mark.parametrize(
    "values",
    [
        [],
        [1],
        [1, 2, 3],
        [1, None, 2, 3],
        [3, 9, 20, None, None, 15, 7],
        [1, 2, 2, 3, 4, 4, 3],
    ],
)
def test_tree_round_trip(values):
    assert tree_values(build_tree(values)) == values


def test_tree_structure():
    root = build_tree([1, 2, 3, None, 4])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None
    assert root.left.right.val == 4
    assert root.right.left is None and root.right.right is None


def test_empty_tree():
    assert build_tree([]) is None
    assert build_tree([None]) is None
    assert tree_values(None) == []


def test_nodes_compare_by_identity():
    first, second = list(build_list([1, 1]))
    assert first.val == second.val
    assert (first == second) is False
    assert len({first, second}) == 2

    root = build_tree([1, 1, 1])
    assert root.left.val == root.right.val
    assert (root.left == root.right) is False
    assert len({root.left, root.right}) == 2

    node = ListNode(3)
    assert (node == node) is True
    tree_node = TreeNode(3)
    assert (tree_node == tree_node) is True