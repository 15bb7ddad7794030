"""
models/student.py
-----------------
Domain model for student records.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Student:
    """
    Represents a single student record.

    Identity is the database id alone: two Student objects with the same id
    are equal even if their other fields differ.

    Attributes:
        id: Database primary key (None for records not yet inserted).
        name: Full name.
        email: Contact email, unique across all students.
        age: Age in years (1-150).
        course: Enrolled course.
    """
    name: str
    email: str
    age: int
    course: str
    id: Optional[int] = None

    def is_persisted(self) -> bool:
        """Returns True once storage has assigned an id."""
        return bool(self.id) and self.id > 0

    @classmethod
    def from_row(cls, row: tuple) -> "Student":
        """Build a Student from an (id, name, email, age, course) row."""
        return cls(id=row[0], name=row[1], email=row[2], age=row[3], course=row[4])

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Student):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"ID: {self.id} | Name: {self.name} | Email: {self.email} "
            f"| Age: {self.age} | Course: {self.course}"
        )


class StudentLookup:
    """
    Result of a single-student lookup: either found (with the student) or absent.

    Usage:
        result = repo.find_by_id(3)
        if result.found:
            print(result.student)
    """

    __slots__ = ("_student",)

    def __init__(self, student: Optional[Student] = None):
        self._student = student

    @classmethod
    def of(cls, student: Student) -> "StudentLookup":
        return cls(student)

    @classmethod
    def absent(cls) -> "StudentLookup":
        return cls()

    @property
    def found(self) -> bool:
        return self._student is not None

    @property
    def student(self) -> Optional[Student]:
        return self._student

    def get(self) -> Student:
        """Return the student, or raise LookupError if absent."""
        if self._student is None:
            raise LookupError("No student found")
        return self._student

    def __bool__(self) -> bool:
        return self.found

    def __repr__(self) -> str:
        if self.found:
            return f"StudentLookup.of({self._student!r})"
        return "StudentLookup.absent()"
