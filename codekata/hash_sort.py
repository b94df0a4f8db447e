"""Sorting values by how often they occur, using a small bucketed frequency table."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_CAPACITY = 7
DEFAULT_LIMIT = 60


def _bucket_index(value: int) -> int:
    """Return value / 10 truncated toward zero."""
    return value // 10 if value >= 0 else -((-value) // 10)


class FrequencyTable:
    """Counts values in buckets of ten (0-9, 10-19, ...) and drains them by frequency."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._buckets: list[dict[int, int]] = [{} for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        """The number of buckets."""
        return len(self._buckets)

    def _index_for(self, value: int) -> int:
        index = _bucket_index(value)
        if not 0 <= index < self.capacity:
            raise ValueError(f"value {value} does not fit in a table of {self.capacity} buckets")
        return index

    def add(self, value: int) -> None:
        """Count one more occurrence of a value."""
        bucket = self._buckets[self._index_for(value)]
        bucket[value] = bucket.get(value, 0) + 1

    def bucket(self, index: int) -> list[tuple[int, int]]:
        """Return the (number, frequency) pairs of one bucket, numbers ascending."""
        if not 0 <= index < self.capacity:
            raise IndexError("bucket index out of range")
        return sorted(self._buckets[index].items())

    def drain_sorted(self, limit: int = DEFAULT_LIMIT) -> list[int]:
        """Remove and return the counted values, most frequent first, ties ascending.

        Only values whose frequency is at most ``limit`` are drained; the rest stay.
        """
        result: list[int] = []
        for frequency in range(limit, 0, -1):
            for bucket in self._buckets:
                matches = sorted(number for number, count in bucket.items() if count == frequency)
                for number in matches:
                    del bucket[number]
                    result.extend([number] * frequency)
        return result

    def __len__(self) -> int:
        return sum(sum(bucket.values()) for bucket in self._buckets)


def sort_by_frequency(values: Iterable[int], limit: int = DEFAULT_LIMIT) -> list[int]:
    """Sort values so that more frequent ones come first and ties go smallest first."""
    table = FrequencyTable()
    for value in values:
        table.add(value)
    return table.drain_sorted(limit)