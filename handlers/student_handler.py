"""
handlers/student_handler.py
----------------------------
Menu actions for student records. Each handler collects input through the
Console, delegates to the StudentService, and shows the reply.
No business logic lives here.
"""

from handlers.console import Console
from services.student_service import StudentService
from utils.logger import get_logger

logger = get_logger(__name__)


def add_student(console: Console, service: StudentService) -> None:
    """
    Menu 1: prompt for each field and add a student.
    The action stops at the first invalid field; a non-numeric age is re-prompted.
    """
    console.show("\n=== ADD NEW STUDENT ===")
    name = console.ask("Enter student name: ")
    error = service.name_error(name)
    if error:
        console.show(error)
        return

    email = console.ask("Enter student email: ")
    error = service.email_error(email)
    if error:
        console.show(error)
        return

    age = str(console.ask_int("Enter student age: "))
    error = service.age_error(age)
    if error:
        console.show(error)
        return

    course = console.ask("Enter course: ")
    console.show(service.add_student(name, email, age, course))


def list_students(console: Console, service: StudentService) -> None:
    """Menu 2."""
    console.show()
    console.show(service.list_students())


def view_student(console: Console, service: StudentService) -> None:
    """Menu 3."""
    student_id = console.ask_int("\nEnter student ID: ")
    console.show(service.describe_student(student_id))


def update_student(console: Console, service: StudentService) -> None:
    """
    Menu 4: show the current record, then prompt for each field.
    Pressing Enter keeps the current value.
    """
    student_id = console.ask_int("\nEnter student ID to update: ")
    result = service.get_student(student_id)
    if not result.found:
        console.show(f"❌ Student not found with ID: {student_id}")
        return

    student = result.student
    console.show(f"Current details: {student}")
    console.show("\nEnter new details (press Enter to keep current value):")
    name = console.ask(f"Name [{student.name}]: ")
    email = console.ask(f"Email [{student.email}]: ")
    age = console.ask(f"Age [{student.age}]: ")
    course = console.ask(f"Course [{student.course}]: ")
    console.show(service.update_student(student, name, email, age, course))


def delete_student(console: Console, service: StudentService) -> None:
    """Menu 5: requires an explicit y/yes before deleting."""
    student_id = console.ask_int("\nEnter student ID to delete: ")
    result = service.get_student(student_id)
    if not result.found:
        console.show(f"❌ Student not found with ID: {student_id}")
        return

    console.show(f"Student to delete: {result.student}")
    answer = console.ask("Are you sure you want to delete this student? (y/N): ")
    console.show(service.delete_student(student_id, answer))


def search_students(console: Console, service: StudentService) -> None:
    """Menu 6."""
    fragment = console.ask("\nEnter student name to search: ")
    console.show()
    console.show(service.search_students(fragment))


def show_statistics(console: Console, service: StudentService) -> None:
    """Menu 7."""
    console.show()
    console.show(service.statistics())
