"""A binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from codekata.binary_tree import TreeNode, preorder_values, sideways_lines


def _add(node: TreeNode | None, value: Any) -> TreeNode:
    if node is None:
        return TreeNode(value)
    if value < node.data:
        node.left = _add(node.left, value)
    elif value > node.data:
        node.right = _add(node.right, value)
    return node


def _min(node: TreeNode) -> Any:
    while node.left is not None:
        node = node.left
    return node.data


def _remove(node: TreeNode | None, value: Any) -> TreeNode | None:
    if node is None:
        raise KeyError(value)
    if value < node.data:
        node.left = _remove(node.left, value)
        return node
    if value > node.data:
        node.right = _remove(node.right, value)
        return node
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    replacement = _min(node.right)
    node.data = replacement
    node.right = _remove(node.right, replacement)
    return node


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: TreeNode | None = None
        for value in values:
            self.add(value)

    def add(self, value: Any) -> None:
        """Insert a value unless it is already present."""
        self._root = _add(self._root, value)

    def remove(self, value: Any) -> None:
        """Remove a value; raise KeyError if it is absent."""
        self._root = _remove(self._root, value)

    def min(self) -> Any:
        """Return the smallest value; raise ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("there are no elements")
        return _min(self._root)

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value == node.data:
                return True
            node = node.left if value < node.data else node.right
        return False

    def __bool__(self) -> bool:
        return self._root is not None

    def preorder(self) -> list[Any]:
        """Return the values in pre-order."""
        return list(preorder_values(self._root))

    def sideways(self) -> str:
        """Return the tree drawn sideways, largest value on top."""
        return "\n".join(sideways_lines(self._root))