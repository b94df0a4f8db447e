"""A box with integer dimensions, ordered by length, then breadth, then height."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """A box of given length, breadth and height."""

    length: int = 0
    breadth: int = 0
    height: int = 0

    def volume(self) -> int:
        """Return length times breadth times height."""
        return self.length * self.breadth * self.height

    def __lt__(self, other: Box) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return (self.length, self.breadth, self.height) < (
            other.length,
            other.breadth,
            other.height,
        )

    def __str__(self) -> str:
        return f"{self.length} {self.breadth} {self.height}"