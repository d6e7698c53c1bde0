import pytest

from algosolve.trees import (
    NaryNode,
    TreeNode,
    is_symmetric,
    is_valid_bst,
    level_order,
    recover_tree,
)


def build(values):
    """Build a binary tree from a level-order list with None for gaps."""
    if not values or values[0] is None:
        return None
    nodes = [None if v is None else TreeNode(v) for v in values]
    children = iter(nodes[1:])
    for node in nodes:
        if node is None:
            continue
        node.left = next(children, None)
        node.right = next(children, None)
    return nodes[0]


def bst_from(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            side = "left" if value < node.val else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, TreeNode(value))
                break
            node = child
    return root


def test_inorder_of_bst_is_sorted():
    values = [50, 30, 70, 20, 40, 60, 80]
    assert bst_from(values).inorder() == sorted(values)


def test_level_order_empty():
    assert level_order(None) == []


def test_level_order_groups_by_depth():
    root = NaryNode(1, [NaryNode(3, [NaryNode(5), NaryNode(6)]), NaryNode(2), NaryNode(4)])
    assert level_order(root) == [[1], [3, 2, 4], [5, 6]]


def test_level_order_single_node():
    assert level_order(NaryNode(7)) == [[7]]


@pytest.mark.parametrize("a,b", [(0, 6), (2, 3), (1, 5)])
def test_recover_tree_restores_swapped_values(a, b):
    values = [40, 20, 60, 10, 30, 50, 70]
    root = bst_from(values)
    nodes = list(root._nodes_inorder())
    nodes[a].val, nodes[b].val = nodes[b].val, nodes[a].val
    assert not is_valid_bst(root)
    recover_tree(root)
    assert is_valid_bst(root)
    assert root.inorder() == sorted(values)


def test_recover_tree_keeps_shape():
    root = build([3, 1, 4, None, None, 2])
    recover_tree(root)
    assert root.inorder() == [1, 2, 3, 4]
    assert root.right.left is not None and root.right.left.val == 3


def test_is_symmetric_true():
    assert is_symmetric(build([1, 2, 2, 3, 4, 4, 3])) is True


def test_is_symmetric_false_values():
    assert is_symmetric(build([1, 2, 2, None, 3, None, 3])) is False


def test_is_symmetric_single_and_one_child():
    assert is_symmetric(TreeNode(1)) is True
    assert is_symmetric(TreeNode(1, TreeNode(2))) is False


def test_is_valid_bst():
    assert is_valid_bst(build([2, 1, 3])) is True
    assert is_valid_bst(build([5, 1, 4, None, None, 3, 6])) is False


def test_is_valid_bst_rejects_duplicates():
    assert is_valid_bst(build([2, 2, 2])) is False