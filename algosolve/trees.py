"""Binary and n-ary trees: traversal, repair and shape checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def _nodes_inorder(self) -> Iterator[TreeNode]:
        stack: list[TreeNode] = []
        node: Optional[TreeNode] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def inorder(self) -> list[int]:
        """Values of the subtree rooted here, in in-order sequence."""
        return [node.val for node in self._nodes_inorder()]


@dataclass(eq=False)
class NaryNode:
    """A node of a tree with any number of children."""

    val: int = 0
    children: list[NaryNode] = field(default_factory=list)


def level_order(root: Optional[NaryNode]) -> list[list[int]]:
    """Values of an n-ary tree grouped by depth, left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue: deque[NaryNode] = deque([root])
    while queue:
        level = [queue.popleft() for _ in range(len(queue))]
        levels.append([node.val for node in level])
        for node in level:
            queue.extend(node.children)
    return levels


def recover_tree(root: Optional[TreeNode]) -> None:
    """Repair a search tree in place by writing its sorted values back in order."""
    if root is None:
        return
    values = sorted(root.inorder())
    for node, value in zip(list(root._nodes_inorder()), values):
        node.val = value


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """True if the tree is a mirror image of itself around its root."""
    if root is None:
        return True
    pending: deque[tuple[Optional[TreeNode], Optional[TreeNode]]] = deque(
        [(root.left, root.right)]
    )
    while pending:
        a, b = pending.popleft()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pending.append((a.left, b.right))
        pending.append((a.right, b.left))
    return True


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """True if an in-order walk of the tree yields strictly increasing values."""
    if root is None:
        return True
    values = root.inorder()
    return all(prev < cur for prev, cur in zip(values, values[1:]))