"""A least-recently-set cache with a fixed capacity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict
from collections.abc import Iterable

MISSING = -1


class Cache(ABC):
    """A key-value cache holding at most ``capacity`` entries."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity

    @abstractmethod
    def set(self, key: int, value: int) -> None:
        """Store a value under a key."""

    @abstractmethod
    def get(self, key: int) -> int:
        """Return the value stored under a key, or -1 if there is none."""


class LRUCache(Cache):
    """Evicts the entry that was set longest ago when the capacity is exceeded."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._entries: OrderedDict[int, int] = OrderedDict()

    def set(self, key: int, value: int) -> None:
        self._entries[key] = value
        self._entries.move_to_end(key, last=False)
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=True)

    def get(self, key: int) -> int:
        return self._entries.get(key, MISSING)


def run_commands(lines: Iterable[str], capacity: int) -> list[int]:
    """Run "set key value" and "get key" commands; return the results of the gets."""
    cache = LRUCache(capacity)
    results: list[int] = []
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        command, *args = parts
        if command == "get" and len(args) == 1:
            results.append(cache.get(int(args[0])))
        elif command == "set" and len(args) == 2:
            cache.set(int(args[0]), int(args[1]))
        else:
            raise ValueError(f"malformed command: {line!r}")
    return results