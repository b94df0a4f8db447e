"""People with per-kind sequential identifiers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

MARK_COUNT = 6


@dataclass
class Person:
    """Someone with a name and an age."""

    name: str
    age: int

    def describe(self) -> str:
        """Return the name and age."""
        return f"{self.name} {self.age}"


@dataclass
class Professor(Person):
    """A professor with a publication count and an identifier."""

    publications: int
    cur_id: int

    def describe(self) -> str:
        return f"{self.name} {self.age} {self.publications} {self.cur_id}"


@dataclass
class Student(Person):
    """A student with six marks and an identifier."""

    marks: tuple[int, ...]
    cur_id: int

    def __post_init__(self) -> None:
        self.marks = tuple(self.marks)
        if len(self.marks) != MARK_COUNT:
            raise ValueError(f"a student needs exactly {MARK_COUNT} marks")

    def describe(self) -> str:
        return f"{self.name} {self.age} {sum(self.marks)} {self.cur_id}"


@dataclass
class Registry:
    """Hands out identifiers counting from 1, separately for professors and students."""

    _professors: int = field(default=0, init=False)
    _students: int = field(default=0, init=False)

    def professor(self, name: str, age: int, publications: int) -> Professor:
        """Create a professor with the next professor identifier."""
        self._professors += 1
        return Professor(name, age, publications, self._professors)

    def student(self, name: str, age: int, marks: Iterable[int]) -> Student:
        """Create a student with the next student identifier."""
        student = Student(name, age, tuple(marks), self._students + 1)
        self._students += 1
        return student