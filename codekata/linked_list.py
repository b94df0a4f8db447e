"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _ListNode:
    data: Any
    next: _ListNode | None = None


class LinkedList:
    """A singly linked list supporting indexed access, insertion and removal."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._front: _ListNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _normalize(self, index: int, allow_end: bool = False) -> int:
        if index < 0:
            index += self._size
        limit = self._size if allow_end else self._size - 1
        if not 0 <= index <= limit:
            raise IndexError("linked list index out of range")
        return index

    def _node_at(self, index: int) -> _ListNode:
        current = self._front
        for _ in range(index):
            assert current is not None
            current = current.next
        assert current is not None
        return current

    def append(self, value: Any) -> None:
        """Add a value at the end of the list."""
        new_node = _ListNode(value)
        if self._front is None:
            self._front = new_node
        else:
            self._node_at(self._size - 1).next = new_node
        self._size += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert a value so that it ends up at the given position."""
        index = self._normalize(index, allow_end=True)
        if index == 0:
            self._front = _ListNode(value, self._front)
        else:
            previous = self._node_at(index - 1)
            previous.next = _ListNode(value, previous.next)
        self._size += 1

    def pop(self, index: int = -1) -> Any:
        """Remove the value at the given position and return it."""
        index = self._normalize(index)
        if index == 0:
            assert self._front is not None
            removed = self._front
            self._front = removed.next
        else:
            previous = self._node_at(index - 1)
            assert previous.next is not None
            removed = previous.next
            previous.next = removed.next
        self._size -= 1
        return removed.data

    def clear(self) -> None:
        """Remove every value."""
        while self._front is not None:
            self.pop(0)

    def __getitem__(self, index: int) -> Any:
        return self._node_at(self._normalize(index)).data

    def __setitem__(self, index: int, value: Any) -> None:
        self._node_at(self._normalize(index)).data = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        current = self._front
        while current is not None:
            yield current.data
            current = current.next

    def __str__(self) -> str:
        return "{" + ", ".join(str(value) for value in self) + "}"

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(repr(value) for value in self)}])"