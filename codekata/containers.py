"""Exercises on stacks, queues and lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

_CLOSERS = {")": "(", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def check_balance(text: str) -> int:
    """Check that round and curly brackets are balanced.

    Return -1 if they are, the index of the first unmatched closing bracket,
    or the length of the text if some bracket is never closed.
    """
    stack: list[str] = []
    for index, char in enumerate(text):
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[char]:
                return index
            stack.pop()
    return -1 if not stack else len(text)


def stutter(queue: Iterable[T]) -> list[T]:
    """Return the items with each one repeated twice in place."""
    return [item for value in queue for item in (value, value)]


def mirror(queue: Iterable[T]) -> list[T]:
    """Return the items followed by the same items in reverse order."""
    items = list(queue)
    return items + items[::-1]


def count_in_range(values: Iterable[int], low: int, high: int) -> int:
    """Count the values between low and high, both included."""
    return sum(1 for value in values if low <= value <= high)


def remove_all(values: Iterable[Any], item: Any) -> list[Any]:
    """Return the values with every occurrence of item left out."""
    return [value for value in values if value != item]