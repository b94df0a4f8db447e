"""Small array exercises: hourglasses, bribes, sliding maxima, parsing and matrices."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable, Sequence

_INT = re.compile(r"\s*([+-]?\d+)")
_SEPARATOR = re.compile(r"\s*\S?")
_MAX_BRIBES = 2


class TooChaoticError(Exception):
    """Raised when someone in the queue has bribed more than twice."""


class Matrix:
    """A rectangular matrix of numbers supporting element-wise addition."""

    def __init__(self, rows: Iterable[Iterable[int]] = ()) -> None:
        self.rows = [list(row) for row in rows]

    @property
    def shape(self) -> tuple[int, int]:
        """The number of rows and the length of the first row."""
        return len(self.rows), len(self.rows[0]) if self.rows else 0

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if len(self.rows) != len(other.rows) or any(
            len(mine) != len(theirs) for mine, theirs in zip(self.rows, other.rows)
        ):
            raise ValueError("matrices must have the same shape")
        return Matrix(
            [a + b for a, b in zip(mine, theirs)] for mine, theirs in zip(self.rows, other.rows)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Matrix({self.rows!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(str(value) for value in row) for row in self.rows)


def hourglass_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest hourglass sum in a rectangular grid of at least 3x3."""
    if len(grid) < 3 or any(len(row) != len(grid[0]) for row in grid) or len(grid[0]) < 3:
        raise ValueError("grid must be rectangular and at least 3x3")
    return max(
        sum(top[j : j + 3]) + middle[j + 1] + sum(bottom[j : j + 3])
        for top, middle, bottom in zip(grid, grid[1:], grid[2:])
        for j in range(len(top) - 2)
    )


def minimum_bribes(queue: Sequence[int]) -> int:
    """Return how many bribes turned 1..n into the given queue.

    Raises TooChaoticError if anyone moved forward more than two places.
    """
    if sorted(queue) != list(range(1, len(queue) + 1)):
        raise ValueError("queue must be a permutation of 1..n")
    bribes = 0
    for position, person in enumerate(queue, start=1):
        if person - position > _MAX_BRIBES:
            raise TooChaoticError("Too chaotic")
        start = max(person - 1 - _MAX_BRIBES, 0)
        bribes += sum(1 for ahead in queue[start : position - 1] if ahead > person)
    return bribes


def sliding_max(values: Iterable[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of length k."""
    if k < 1:
        raise ValueError("window length must be at least 1")
    items = list(values)
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(items):
        if window and window[0] <= i - k:
            window.popleft()
        while window and value >= items[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(items[window[0]])
    return result


def parse_ints(text: str) -> list[int]:
    """Read integers separated by single characters, such as "23,4,56"."""
    numbers: list[int] = []
    position = 0
    while match := _INT.match(text, position):
        numbers.append(int(match.group(1)))
        separator = _SEPARATOR.match(text, match.end())
        assert separator is not None
        position = separator.end()
    return numbers