"""Small text exercises: letter counts, sentence capitals and decimal parsing."""

from __future__ import annotations

import re
import string

_DECIMAL = re.compile(r"(\d*)\.(\d*)")


def letter_frequency(text: str) -> dict[str, int]:
    """Count each lower-case letter a-z; every letter is present, in order.

    Other characters, upper-case letters included, are not counted.
    """
    counts = dict.fromkeys(string.ascii_lowercase, 0)
    for char in text:
        if char in counts:
            counts[char] += 1
    return counts


def _upper_if_lower(char: str) -> str:
    return char.upper() if char in string.ascii_lowercase else char


def capitalize_sentences(text: str) -> str:
    """Upper-case the first letter and every letter that directly follows a '.'."""
    if not text:
        return text
    chars = list(text)
    chars[0] = _upper_if_lower(chars[0])
    for i, char in enumerate(text[:-1]):
        if char == ".":
            chars[i + 1] = _upper_if_lower(chars[i + 1])
    return "".join(chars)


def parse_decimal(text: str) -> float:
    """Parse digits, a '.', then digits, such as "12.75", into a float.

    Raises ValueError if the text has no '.' or holds anything but digits.
    """
    match = _DECIMAL.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"not a decimal number with a '.': {text!r}")
    whole, fraction = match.groups()
    return float(f"{whole or '0'}.{fraction or '0'}")