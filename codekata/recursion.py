"""Recursion and backtracking exercises."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def power(base: int, exp: int) -> int:
    """Return base raised to a non-negative exponent."""
    if exp < 0:
        raise ValueError("exponent must not be negative")
    if exp == 0:
        return 1
    return base * power(base, exp - 1) if exp > 1 else base


def is_palindrome(text: str) -> bool:
    """Tell whether the text reads the same backwards."""
    if len(text) <= 1:
        return True
    return text[0] == text[-1] and is_palindrome(text[1:-1])


def binary_digits(n: int) -> str:
    """Return the binary digits of a positive integer."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return "1"
    return binary_digits(n // 2) + str(n % 2)


def stars(n: int) -> str:
    """Return a row of n stars, n at least 1."""
    if n < 1:
        raise ValueError("n must be positive")
    return "*" * n


def reverse_lines(lines: Iterable[str]) -> list[str]:
    """Return the lines, without their line endings, last first."""
    return [line.removesuffix("\n") for line in lines][::-1]


def _strings(alphabet: str, digits: int) -> Iterator[str]:
    if digits < 0:
        raise ValueError("digits must not be negative")
    for combination in itertools.product(alphabet, repeat=digits):
        yield "".join(combination)


def binary_strings(digits: int) -> Iterator[str]:
    """Yield every string of the given number of binary digits, ascending."""
    return _strings("01", digits)


def decimal_strings(digits: int) -> Iterator[str]:
    """Yield every string of the given number of decimal digits, ascending."""
    return _strings("0123456789", digits)


def permutations(text: str) -> Iterator[str]:
    """Yield every ordering of the characters, choosing positions left to right."""
    for ordering in itertools.permutations(text):
        yield "".join(ordering)


def sublists(items: Sequence[Any]) -> Iterator[list[Any]]:
    """Yield every sublist, exploring "with the first item" before "without"."""
    if not items:
        yield []
        return
    first, rest = items[0], items[1:]
    for tail in sublists(rest):
        yield [first, *tail]
    yield from sublists(rest)


def format_sublist(items: Iterable[Any]) -> str:
    """Format items as {a, b, c}."""
    return "{" + ", ".join(str(item) for item in items) + "}"