"""A growable list of student grades with an average."""

from __future__ import annotations

from collections.abc import Iterable


class Gradebook:
    """Holds integer grades; more can be added later."""

    def __init__(self, grades: Iterable[int] = ()) -> None:
        self._grades = list(grades)

    @property
    def grades(self) -> list[int]:
        """A copy of the grades in the order they were given."""
        return list(self._grades)

    def extend(self, grades: Iterable[int]) -> None:
        """Add more grades after the existing ones."""
        self._grades.extend(grades)

    def average(self) -> float:
        """Return the mean grade; raise ValueError if there are none."""
        if not self._grades:
            raise ValueError("no grades to average")
        return sum(self._grades) / len(self._grades)

    def __len__(self) -> int:
        return len(self._grades)

    def __str__(self) -> str:
        return "  ".join(str(grade) for grade in self._grades)