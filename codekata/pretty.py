"""Formatting three numbers in three fixed styles."""

from __future__ import annotations

import math

_WIDTH = 15
_FILL = "_"
_MASK = 2**64 - 1


def format_values(a: float, b: float, c: float) -> tuple[str, str, str]:
    """Format a as 64-bit hex, b as signed fixed-point and c as upper-case scientific.

    The second and third values are right-aligned to 15 characters, padded with '_'.
    """
    whole = math.trunc(a) & _MASK
    first = f"{whole:#x}" if whole else "0"
    second = f"{b:+.2f}".rjust(_WIDTH, _FILL)
    third = f"{c:.9E}".rjust(_WIDTH, _FILL)
    return first, second, third