"""
repositories/student_repo.py
-----------------------------
Data access layer for student records.
All SQL queries related to the `students` table live here.

Every method opens its own connection, runs one statement and closes the
connection again. Database errors are logged and turned into the method's
empty result (False, [], 0 or an absent lookup); they never propagate.
"""

import psycopg2
from psycopg2 import errors

from db import init_db
from db.connection import connection, release_connection, get_connection
from models.student import Student, StudentLookup
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, name, email, age, course"


class StudentRepository:
    """Repository for CRUD operations on the students table."""

    # ── SCHEMA ────────────────────────────────────────────

    def ensure_schema(self) -> bool:
        """
        Create the database and the students table if they are missing.
        Safe to call on every startup.

        Returns:
            True if the schema is in place, False if initialization failed.
            A failure is logged; later calls are not blocked and fail on their own.
        """
        try:
            init_db.create_database()
        except psycopg2.Error as e:
            # Without CREATEDB this fails, but the database may already exist.
            logger.warning(f"Could not verify/create database: {e}")
        try:
            init_db.create_tables()
            return True
        except psycopg2.Error as e:
            logger.error(f"Failed to initialize schema: {e}")
            return False

    def test_connection(self) -> bool:
        """Open and immediately release a connection."""
        conn = None
        try:
            conn = get_connection()
            logger.info("Database connection successful.")
            return True
        except psycopg2.Error as e:
            logger.error(f"Database connection failed: {e}")
            return False
        finally:
            release_connection(conn)

    # ── CREATE ────────────────────────────────────────────

    def insert(self, student: Student) -> bool:
        """
        Insert a new student. Storage assigns the id.

        Args:
            student: The Student to persist. Its `id` is set on success.

        Returns:
            True if exactly one row was inserted; False on a duplicate email
            or a database error.
        """
        sql = """
            INSERT INTO students (name, email, age, course)
            VALUES (%s, %s, %s, %s)
            RETURNING id;
        """
        try:
            with connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (student.name, student.email, student.age, student.course))
                    inserted = cur.rowcount == 1
                    row = cur.fetchone()
            if inserted and row:
                student.id = row[0]
                logger.info(f"Added student #{student.id} ({student.email})")
            return inserted
        except errors.UniqueViolation:
            logger.warning(f"Email already exists: {student.email}")
            return False
        except psycopg2.Error as e:
            logger.error(f"Failed to add student: {e}")
            return False

    # ── READ ──────────────────────────────────────────────

    def find_all(self) -> list[Student]:
        """Return every student ordered by id ascending."""
        sql = f"SELECT {_COLUMNS} FROM students ORDER BY id;"
        try:
            with connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql)
                    return [Student.from_row(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to retrieve students: {e}")
            return []

    def find_by_id(self, student_id: int) -> StudentLookup:
        """
        Fetch a single student by primary key.

        Returns:
            A found lookup, or an absent one if no row matches or on error.
        """
        sql = f"SELECT {_COLUMNS} FROM students WHERE id = %s;"
        return self._find_one(sql, (student_id,), f"id {student_id}")

    def find_by_email(self, email: str) -> StudentLookup:
        """Fetch a single student by exact email match."""
        sql = f"SELECT {_COLUMNS} FROM students WHERE email = %s;"
        return self._find_one(sql, (email,), f"email {email}")

    def count(self) -> int:
        """Total number of students (0 on error)."""
        sql = "SELECT COUNT(*) FROM students;"
        try:
            with connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql)
                    return int(cur.fetchone()[0])
        except psycopg2.Error as e:
            logger.error(f"Failed to count students: {e}")
            return 0

    def search_by_name(self, fragment: str) -> list[Student]:
        """
        Case-insensitive substring search on name, ordered by name ignoring case.

        Args:
            fragment: Text to look for anywhere in the name. LIKE wildcards
                in it are matched literally.
        """
        sql = f"SELECT {_COLUMNS} FROM students WHERE name ILIKE %s ORDER BY lower(name), name, id;"
        pattern = f"%{self._escape_like(fragment)}%"
        try:
            with connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (pattern,))
                    return [Student.from_row(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to search students by name '{fragment}': {e}")
            return []

    # ── UPDATE ────────────────────────────────────────────

    def update(self, student: Student) -> bool:
        """
        Rewrite name, email, age and course of the row with `student.id`.

        Returns:
            True if exactly one row was updated; False if the id does not
            exist, the new email is taken, or on a database error.
        """
        if student.id is None:
            logger.warning("Refusing to update a student that has no id.")
            return False

        sql = "UPDATE students SET name = %s, email = %s, age = %s, course = %s WHERE id = %s;"
        try:
            with connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (
                        student.name, student.email, student.age,
                        student.course, student.id,
                    ))
                    updated = cur.rowcount == 1
            if updated:
                logger.info(f"Updated student #{student.id}")
            return updated
        except errors.UniqueViolation:
            logger.warning(f"Email already exists: {student.email}")
            return False
        except psycopg2.Error as e:
            logger.error(f"Failed to update student #{student.id}: {e}")
            return False

    # ── DELETE ────────────────────────────────────────────

    def delete(self, student_id: int) -> bool:
        """Delete a student by id. True if exactly one row was removed."""
        sql = "DELETE FROM students WHERE id = %s;"
        try:
            with connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (student_id,))
                    deleted = cur.rowcount == 1
            if deleted:
                logger.info(f"Deleted student #{student_id}")
            return deleted
        except psycopg2.Error as e:
            logger.error(f"Failed to delete student #{student_id}: {e}")
            return False

    # ── HELPERS ───────────────────────────────────────────

    def _find_one(self, sql: str, params: tuple, label: str) -> StudentLookup:
        try:
            with connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, params)
                    row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Failed to retrieve student by {label}: {e}")
            return StudentLookup.absent()
        if row is None:
            logger.debug(f"No student with {label}")
            return StudentLookup.absent()
        return StudentLookup.of(Student.from_row(row))

    @staticmethod
    def _escape_like(text: str) -> str:
        """Escape LIKE wildcards so `text` matches literally."""
        return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
