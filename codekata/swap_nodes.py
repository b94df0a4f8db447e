"""Swapping subtrees of a binary tree at multiples of a depth."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

NO_CHILD = -1


def _inorder(children: dict[int, list[int]], root: int) -> list[int]:
    result: list[int] = []
    stack: list[int] = []
    node = root
    while stack or node != NO_CHILD:
        while node != NO_CHILD:
            stack.append(node)
            node = children[node][0]
        node = stack.pop()
        result.append(node)
        node = children[node][1]
    return result


def swap_nodes(indexes: Sequence[Sequence[int]], queries: Sequence[int]) -> list[list[int]]:
    """Apply each query to the tree and return its in-order traversal after each.

    ``indexes[i]`` holds the left and right child of node ``i + 1`` (-1 for none);
    node 1 is the root at depth 1. A query ``k`` swaps the children of every node
    whose depth is a multiple of ``k``.
    """
    if not indexes:
        raise ValueError("the tree needs at least a root node")
    count = len(indexes)
    children: dict[int, list[int]] = {}
    for number, (left, right) in enumerate(indexes, start=1):
        for child in (left, right):
            if child != NO_CHILD and not 1 <= child <= count:
                raise ValueError(f"node {number} has unknown child {child}")
        children[number] = [left, right]

    depths = {1: 1}
    pending = deque([1])
    while pending:
        node = pending.popleft()
        for child in children[node]:
            if child != NO_CHILD:
                depths[child] = depths[node] + 1
                pending.append(child)

    results: list[list[int]] = []
    for k in queries:
        if k < 1:
            raise ValueError("query depth must be at least 1")
        for node, depth in depths.items():
            if depth % k == 0:
                children[node].reverse()
        results.append(_inorder(children, 1))
    return results