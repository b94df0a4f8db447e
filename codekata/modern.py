"""Small demonstrations: typed addition, factorials, generators, filters and ordered points."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from numbers import Real


def add(a: Real, b: Real) -> Real:
    """Add two numbers of the same numeric type; raise TypeError otherwise."""
    if not isinstance(a, Real) or not isinstance(b, Real):
        raise TypeError("add() needs numbers")
    if type(a) is not type(b):
        raise TypeError("add() needs two numbers of the same type")
    return a + b


def factorial(n: int) -> int:
    """Return n!, taking every n of 1 or less to 1."""
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def make_vector() -> list[int]:
    """Return the list 1, 2, 3 with 4 appended."""
    values = [1, 2, 3]
    values.append(4)
    return values


def counter(limit: int = 5) -> Iterator[int]:
    """Yield 0 up to but not including limit."""
    yield from range(limit)


def even_squares(values: Iterable[int]) -> list[int]:
    """Return the squares of the even values, in order."""
    return [value * value for value in values if value % 2 == 0]


@dataclass(frozen=True, order=True)
class Point:
    """A point ordered by x, then y."""

    x: int
    y: int


def compare_points(first: Point, second: Point) -> int:
    """Return -1, 0 or 1 as first is less than, equal to or greater than second."""
    return (first > second) - (first < second)