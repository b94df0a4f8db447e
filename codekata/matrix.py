"""Snake-shaped number matrices and run-length coding of matrices read in a zig-zag."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby


def snake_matrix(rows: int, cols: int) -> list[list[int]]:
    """Number a path that snakes through the matrix, leaving other cells 0.

    Even rows are filled completely, alternately left to right and right to
    left; each odd row holds one link cell at the end where the path turns.
    """
    if rows < 0 or cols < 1:
        raise ValueError("rows must not be negative and cols must be positive")
    matrix = [[0] * cols for _ in range(rows)]
    number = 1
    links = 0
    for i, row in enumerate(matrix):
        if i % 2 == 0:
            columns = range(cols) if (i // 2) % 2 == 0 else range(cols - 1, -1, -1)
            for j in columns:
                row[j] = number
                number += 1
        else:
            row[cols - 1 if links % 2 == 0 else 0] = number
            number += 1
            links += 1
    return matrix


def boustrophedon(matrix: Iterable[Sequence[int]]) -> list[int]:
    """Read the rows in turn, even rows forwards and odd rows backwards."""
    values: list[int] = []
    for i, row in enumerate(matrix):
        values.extend(row if i % 2 == 0 else reversed(row))
    return values


def run_length(values: Iterable[int]) -> list[int]:
    """Encode values as length, value, length, value, ... for each run."""
    code: list[int] = []
    for value, run in groupby(values):
        code.extend((sum(1 for _ in run), value))
    return code


def compression_ratio(values: Sequence[int]) -> float:
    """Return the length of the run-length code divided by the number of values."""
    if not values:
        raise ValueError("no values to compress")
    return len(run_length(values)) / len(values)