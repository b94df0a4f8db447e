"""Reading numbers from text streams and from sentinel-terminated input."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TextIO

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return float(match.group(0))


def read_block(stream: TextIO) -> list[float] | None:
    """Read numbers, one per line, up to a blank line or the end of the stream.

    Each line is read from its leading number. Returns None when the stream
    had no more lines to give.
    """
    values: list[float] = []
    while True:
        line = stream.readline()
        if not line:
            return values or None
        line = line.removesuffix("\n")
        if line == "":
            return values
        values.append(_leading_float(line))


def read_ints(stream: TextIO) -> list[int]:
    """Read whitespace-separated integers until something else turns up."""
    text = stream.read()
    numbers: list[int] = []
    position = 0
    while match := _INT_PATTERN.match(text, position):
        numbers.append(int(match.group(1)))
        position = match.end()
    return numbers


def read_until_sentinel(values: Iterable[int], sentinel: int = -1) -> list[int]:
    """Collect values up to the sentinel, or all of them if it never comes."""
    collected: list[int] = []
    for value in values:
        if value == sentinel:
            break
        collected.append(value)
    return collected