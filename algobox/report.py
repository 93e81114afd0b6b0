"""Student marks, grades and a printed report."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional

SUBJECTS = 5
MAX_STUDENTS = 50


def grade_for(average: float) -> str:
    """Return the letter grade for an average mark."""
    if average >= 90:
        return "A"
    if average >= 75:
        return "B"
    if average >= 60:
        return "C"
    if average >= 40:
        return "D"
    return "F"


@dataclass(frozen=True)
class Student:
    """A student with a roll number and marks in five subjects."""

    name: str
    roll: int
    marks: tuple[float, ...]

    def __post_init__(self) -> None:
        marks = tuple(self.marks)
        if len(marks) != SUBJECTS:
            raise ValueError(f"expected {SUBJECTS} marks, got {len(marks)}")
        object.__setattr__(self, "marks", marks)

    @property
    def average(self) -> float:
        return sum(self.marks) / SUBJECTS

    @property
    def grade(self) -> str:
        return grade_for(self.average)


def format_report(students: Iterable[Student]) -> str:
    """Render the report for every student."""
    parts = ["\n--- Student Report ---\n"]
    for student in students:
        parts.append(
            f"\nName: {student.name}"
            f"\nRoll No: {student.roll}"
            f"\nAverage Marks: {student.average:.2f}"
            f"\nGrade: {student.grade}\n"
        )
    return "".join(parts)


def _ask(prompt: str, convert):
    while True:
        words = input(prompt).split()
        if words:
            try:
                return convert(words[0])
            except ValueError:
                pass
        print("Invalid input, try again.")


def main(argv: Optional[list[str]] = None) -> int:
    """Read students interactively and print their report."""
    del argv
    try:
        count = _ask("Enter number of students: ", int)
        if not 0 <= count <= MAX_STUDENTS:
            print(f"Number of students must be between 0 and {MAX_STUDENTS}.")
            return 1
        students = []
        for index in range(1, count + 1):
            print(f"\nEnter details for student {index}")
            name = _ask("Name: ", str)
            roll = _ask("Roll No: ", int)
            marks = tuple(
                _ask(f"Enter marks of subject {subject}: ", float)
                for subject in range(1, SUBJECTS + 1)
            )
            students.append(Student(name, roll, marks))
    except EOFError:
        print()
        return 1
    print(format_report(students), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())