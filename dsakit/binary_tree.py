"""Binary tree nodes with traversals, a bracketed string form and size measures."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A tree node; nodes compare by identity."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _preorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield root.data
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _inorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.data
        yield from _inorder(root.right)


def _postorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield from _postorder(root.left)
        yield from _postorder(root.right)
        yield root.data


def preorder(root: TreeNode | None) -> list:
    """Values in node, left, right order."""
    return list(_preorder(root))


def inorder(root: TreeNode | None) -> list:
    """Values in left, node, right order."""
    return list(_inorder(root))


def postorder(root: TreeNode | None) -> list:
    """Values in left, right, node order."""
    return list(_postorder(root))


def tree_to_str(root: TreeNode | None) -> str:
    """Bracketed form: each child in parentheses, ``()`` for a missing left child
    that is followed by a right one. An empty tree gives an empty string."""
    if root is None:
        return ""
    text = str(root.data)
    if root.left is not None:
        text += f"({tree_to_str(root.left)})"
    if root.right is not None:
        if root.left is None:
            text += "()"
        text += f"({tree_to_str(root.right)})"
    return text


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: TreeNode | None) -> list:
    """Values level by level, left to right."""
    result = []
    pending: deque[TreeNode] = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        result.append(node.data)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return result


def sum_at_level(root: TreeNode | None, k: int) -> Any:
    """Sum of the values at depth ``k`` (root is depth 0); -1 for an empty tree."""
    if root is None:
        return -1
    for depth, level in enumerate(_levels(root)):
        if depth == k:
            return sum(node.data for node in level)
    return 0


def count_nodes(root: TreeNode | None) -> int:
    """Number of nodes."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def sum_nodes(root: TreeNode | None) -> Any:
    """Sum of all node values."""
    if root is None:
        return 0
    return sum_nodes(root.left) + sum_nodes(root.right) + root.data


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _height_and_diameter(root: TreeNode | None) -> tuple[int, int]:
    if root is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(root.left)
    right_height, right_diameter = _height_and_diameter(root.right)
    through_root = left_height + right_height + 1
    return (
        max(left_height, right_height) + 1,
        max(through_root, left_diameter, right_diameter),
    )


def diameter(root: TreeNode | None) -> int:
    """Number of nodes on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]