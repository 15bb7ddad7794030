"""
services/student_service.py
----------------------------
Business logic for managing student records.
Validates console input, calls the repository, and formats replies.
Nothing here prints; every action returns the message to show.
"""

from typing import Optional

from models.student import Student, StudentLookup
from repositories.student_repo import StudentRepository
from utils.logger import get_logger
from utils.validators import (
    MAX_AGE,
    MIN_AGE,
    is_confirmation,
    is_non_empty,
    is_valid_email,
    parse_age,
)

logger = get_logger(__name__)

_RULE = "-" * 60


class StudentService:
    """Coordinates validation and persistence of student records."""

    def __init__(self, repo: Optional[StudentRepository] = None):
        self.repo = repo or StudentRepository()

    # ── Startup ───────────────────────────────────────────

    def initialize(self) -> bool:
        """Create the database/table if needed. Failure is reported, not raised."""
        return self.repo.ensure_schema()

    def check_connection(self) -> bool:
        """True if the database server accepts a connection."""
        return self.repo.test_connection()

    # ── Field checks ──────────────────────────────────────
    # Each returns the message to show, or None when the value is acceptable.

    def name_error(self, name: str) -> Optional[str]:
        if not is_non_empty(name):
            return "⚠️ Name cannot be empty!"
        return None

    def email_error(self, email: str) -> Optional[str]:
        """Format check, then the uniqueness check against stored students."""
        email = (email or "").strip()
        if not is_valid_email(email):
            return "⚠️ Please enter a valid email address!"
        if self.repo.find_by_email(email).found:
            return "⚠️ Email already exists! Please use a different email."
        return None

    def age_error(self, age_text: str) -> Optional[str]:
        if parse_age(age_text) is None:
            return f"⚠️ Please enter a valid age ({MIN_AGE}-{MAX_AGE})!"
        return None

    def course_error(self, course: str) -> Optional[str]:
        if not is_non_empty(course):
            return "⚠️ Course cannot be empty!"
        return None

    # ── Actions ───────────────────────────────────────────

    def add_student(self, name: str, email: str, age_text: str, course: str) -> str:
        """
        Validate the raw fields and insert a new student.
        Stops at the first invalid field.

        Returns:
            A success or error message for the user.
        """
        name = (name or "").strip()
        email = (email or "").strip()
        course = (course or "").strip()

        error = (
            self.name_error(name)
            or self.email_error(email)
            or self.age_error(age_text)
            or self.course_error(course)
        )
        if error:
            return error

        student = Student(name=name, email=email, age=parse_age(age_text), course=course)
        if self.repo.insert(student):
            return f"✅ Student added successfully! (ID: {student.id})"
        return "❌ Failed to add student. Please try again."

    def list_students(self) -> str:
        """All students, ordered by id, with a total line."""
        students = self.repo.find_all()
        lines = ["=== ALL STUDENTS ===", _RULE]
        if not students:
            lines.append("No students found in database.")
        else:
            lines.extend(str(s) for s in students)
            lines.append("")
            lines.append(f"Total Students: {len(students)}")
        lines.append(_RULE)
        return "\n".join(lines)

    def get_student(self, student_id: int) -> StudentLookup:
        return self.repo.find_by_id(student_id)

    def describe_student(self, student_id: int) -> str:
        result = self.repo.find_by_id(student_id)
        if not result.found:
            return f"❌ Student not found with ID: {student_id}"
        return f"=== STUDENT DETAILS ===\n{result.student}"

    def update_student(
        self, student: Student, name: str, email: str, age_text: str, course: str
    ) -> str:
        """
        Apply edited fields to `student` and persist them.

        Blank input keeps the current value. An invalid email or age, or an
        email already used by another student, also keeps the current value
        and adds a note to the reply.
        """
        notes = []

        name = (name or "").strip()
        if name:
            student.name = name

        email = (email or "").strip()
        if email:
            if not is_valid_email(email):
                notes.append("⚠️ Invalid email format. Keeping current value.")
            else:
                existing = self.repo.find_by_email(email)
                if existing.found and existing.student.id != student.id:
                    notes.append("⚠️ Email already exists. Keeping current value.")
                else:
                    student.email = email

        age_text = (age_text or "").strip()
        if age_text:
            age = parse_age(age_text)
            if age is None:
                notes.append("⚠️ Invalid age. Keeping current value.")
            else:
                student.age = age

        course = (course or "").strip()
        if course:
            student.course = course

        if self.repo.update(student):
            notes.append("✅ Student updated successfully!")
        else:
            notes.append("❌ Failed to update student.")
        return "\n".join(notes)

    def delete_student(self, student_id: int, confirmation: str) -> str:
        """Delete only after an explicit 'y'/'yes'."""
        if not is_confirmation(confirmation):
            return "Deletion cancelled."
        if self.repo.delete(student_id):
            return "✅ Student deleted successfully!"
        return "❌ Failed to delete student."

    def search_students(self, fragment: str) -> str:
        fragment = (fragment or "").strip()
        if not fragment:
            return "⚠️ Search term cannot be empty!"

        students = self.repo.search_by_name(fragment)
        lines = ["=== SEARCH RESULTS ===", _RULE]
        if not students:
            lines.append(f"No students found matching '{fragment}'")
        else:
            lines.append(f"Found {len(students)} student(s) matching '{fragment}':")
            lines.extend(str(s) for s in students)
        lines.append(_RULE)
        return "\n".join(lines)

    def statistics(self) -> str:
        total = self.repo.count()
        return (
            "=== DATABASE STATISTICS ===\n"
            f"Total Students: {total}\n"
            "==========================="
        )
