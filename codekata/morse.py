"""A tiny Morse code table using '.' and '_', with encoding and decoding."""

from __future__ import annotations

_ENCODE = {
    "E": ". ",
    "M": "__ ",
    "R": "._. ",
    "U": ".._ ",
    "L": "._.. ",
    "A": "._ ",
    "H": ".... ",
}
_DECODE = {code: letter for letter, code in _ENCODE.items()}


def encode(message: str) -> str:
    """Encode letters as codes each followed by a space; spaces stay spaces.

    Letters outside the table encode to nothing.
    """
    return "".join(" " if char == " " else _ENCODE.get(char, "") for char in message)


def decode(message: str) -> str:
    """Decode space-terminated codes; a doubled space marks a word break.

    A trailing code without its space and unknown codes decode to nothing.
    """
    letters: list[str] = []
    start = 0
    i = 0
    while i < len(message):
        if message[i] == " ":
            letters.append(_DECODE.get(message[start : i + 1], ""))
            start = i + 1
            if i + 1 < len(message) and message[i + 1] == " ":
                letters.append(" ")
                i += 1
                start += 1
        i += 1
    return "".join(letters)


def translate(message: str) -> str:
    """Decode a message that starts with '.' or '_', otherwise encode it."""
    if message[:1] in (".", "_") and message:
        return decode(message)
    return encode(message)