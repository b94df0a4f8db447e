"""A plain binary tree built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

INDENT = "    "


@dataclass
class TreeNode:
    """A tree node holding a value and two optional children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder_values(node: TreeNode | None) -> Iterator[Any]:
    """Yield the values of a subtree in pre-order."""
    if node is not None:
        yield node.data
        yield from preorder_values(node.left)
        yield from preorder_values(node.right)


def sideways_lines(node: TreeNode | None, indent: str = "") -> Iterator[str]:
    """Yield the lines of a subtree drawn sideways, right subtree on top."""
    if node is not None:
        yield from sideways_lines(node.right, indent + INDENT)
        yield f"{indent}{node.data}"
        yield from sideways_lines(node.left, indent + INDENT)


def _contains(node: TreeNode | None, value: Any) -> bool:
    if node is None:
        return False
    if node.data == value:
        return True
    return _contains(node.left, value) or _contains(node.right, value)


class BinaryTree:
    """A binary tree wrapped around an existing root node."""

    def __init__(self, root: TreeNode | None) -> None:
        self.root = root

    def preorder(self) -> list[Any]:
        """Return the values in pre-order."""
        return list(preorder_values(self.root))

    def __contains__(self, value: Any) -> bool:
        return _contains(self.root, value)

    def sideways(self) -> str:
        """Return the tree drawn sideways, one node per line."""
        return "\n".join(sideways_lines(self.root))