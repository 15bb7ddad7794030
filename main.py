"""
main.py
-------
Entry point for the student records console.

Responsibilities:
    - Load connection settings and inject them into the database layer.
    - Create the database/table if they are missing.
    - Run the interactive menu until the user exits.
"""

import sys
from typing import Callable

from config import LOG_LEVEL, ConfigError, load_database_config
from db.connection import configure, reset
from handlers import student_handler
from handlers.console import Console
from services.student_service import StudentService
from utils.logger import get_logger, set_level

logger = get_logger(__name__)

Action = Callable[[Console, StudentService], None]

# Choice 8 (exit) is handled by the loop itself.
MENU: dict[int, tuple[str, Action]] = {
    1: ("Add New Student", student_handler.add_student),
    2: ("View All Students", student_handler.list_students),
    3: ("View Student by ID", student_handler.view_student),
    4: ("Update Student", student_handler.update_student),
    5: ("Delete Student", student_handler.delete_student),
    6: ("Search Students", student_handler.search_students),
    7: ("Show Statistics", student_handler.show_statistics),
}
EXIT_CHOICE = 8

_BANNER = """\
╔══════════════════════════════════════════╗
║    Student Database Management System    ║
╚══════════════════════════════════════════╝"""


def render_menu() -> str:
    lines = ["", "════════════ MAIN MENU ════════════"]
    for choice, (label, _) in MENU.items():
        lines.append(f" {choice}. {label}")
    lines.append(f" {EXIT_CHOICE}. Exit Application")
    lines.append("═══════════════════════════════════")
    return "\n".join(lines)


def handle_choice(choice: int, console: Console, service: StudentService) -> bool:
    """
    Run one menu choice.

    Returns:
        False when the user confirmed exit, True to keep the menu running.
    """
    if choice == EXIT_CHOICE:
        if console.confirm("\nAre you sure you want to exit? (y/N): "):
            console.show("\nThank you for using the Student Database Management System. Goodbye!")
            return False
        console.show("Returning to main menu...")
        return True

    entry = MENU.get(choice)
    if entry is None:
        console.show(f"❌ Invalid choice! Please select a number between 1-{EXIT_CHOICE}.")
    else:
        label, action = entry
        try:
            action(console, service)
        except (KeyboardInterrupt, EOFError):
            raise
        except Exception as e:
            logger.exception(f"Unexpected error in '{label}'")
            console.show(f"An error occurred: {e}")
    console.pause()
    return True


def run(console: Console, service: StudentService) -> None:
    """Initialize the schema and loop over the menu until exit."""
    console.show(_BANNER)
    console.show("\nInitializing database...")
    if not service.check_connection():
        console.show("⚠️ Cannot reach the database server. Operations will fail until it is reachable.")
    elif service.initialize():
        console.show("Application ready!")
    else:
        console.show("⚠️ Database initialization failed. Operations may not work until it is reachable.")

    running = True
    while running:
        console.show(render_menu())
        choice = console.ask_int("Enter your choice: ", empty_message="Please enter a number.")
        running = handle_choice(choice, console, service)


def main() -> int:
    """Console script entry point. Returns the process exit code."""
    set_level(LOG_LEVEL)
    try:
        configure(load_database_config())
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        run(Console(), StudentService())
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
    finally:
        reset()
    return 0


if __name__ == "__main__":
    sys.exit(main())
