"""Magic-square checks and cyclic number squares."""

from __future__ import annotations

from collections.abc import Sequence


def is_magic_square(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether every row, column and both diagonals have the same sum.

    A matrix that is not square is never magic; an empty one raises ValueError.
    """
    rows = [list(row) for row in matrix]
    if not rows:
        raise ValueError("matrix must have at least one row")
    size = len(rows)
    if any(len(row) != size for row in rows):
        return False
    diagonal = sum(row[i] for i, row in enumerate(rows))
    anti_diagonal = sum(row[size - 1 - i] for i, row in enumerate(rows))
    if diagonal != anti_diagonal:
        return False
    return all(sum(column) == diagonal for column in zip(*rows)) and all(
        sum(row) == anti_diagonal for row in rows
    )


def rotated_square(first: int, last: int) -> list[list[int]]:
    """Build the square whose first row is first..last and each next row is rotated left.

    Every row and column then holds each number of the range exactly once.
    """
    row = list(range(first, last + 1))
    if not row:
        raise ValueError("the range must hold at least one number")
    return [row[shift:] + row[:shift] for shift in range(len(row))]