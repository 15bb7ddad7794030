"""
Shared fixtures.

`fake_db` replaces psycopg2.connect with an in-memory stand-in that records
every statement and replays queued results, so repository code can be
exercised without a server. `memory_repo` is a dict-backed StudentRepository
for service and handler tests.
"""

from collections import deque

import psycopg2
import pytest

from config import DatabaseConfig
from db import connection as db_connection
from models.student import Student, StudentLookup

TEST_CONFIG = DatabaseConfig(
    host="db.test",
    port=5432,
    database="student_db",
    user="tester",
    password="secret",
)


def _normalize(sql) -> str:
    text = sql if isinstance(sql, str) else repr(sql)
    return " ".join(text.split())


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self.conn = conn
        self.rows: list = []
        self.rowcount = -1
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def execute(self, sql, params=None):
        self.conn.db.executed.append((_normalize(sql), params))
        result = self.conn.db.next_result()
        if "error" in result:
            raise result["error"]
        self.rows = list(result.get("rows", []))
        self.rowcount = result.get("rowcount", len(self.rows))

    def fetchone(self):
        return self.rows.pop(0) if self.rows else None

    def fetchall(self):
        rows, self.rows = self.rows, []
        return rows


class FakeConnection:
    def __init__(self, db: "FakeDatabase", kwargs: dict):
        self.db = db
        self.kwargs = kwargs
        self.autocommit = False
        self.closed = 0
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = 1


class FakeDatabase:
    """Stand-in for the server: queued results, executed statements, opened connections."""

    def __init__(self):
        self.results: deque = deque()
        self.executed: list = []
        self.connections: list[FakeConnection] = []
        self.connect_error: Exception | None = None

    def queue(self, rows=None, rowcount=None, error=None) -> None:
        result: dict = {}
        if error is not None:
            result["error"] = error
        if rows is not None:
            result["rows"] = rows
        if rowcount is not None:
            result["rowcount"] = rowcount
        self.results.append(result)

    def next_result(self) -> dict:
        return self.results.popleft() if self.results else {"rows": [], "rowcount": 0}

    def connect(self, **kwargs):
        if self.connect_error is not None:
            raise self.connect_error
        conn = FakeConnection(self, kwargs)
        self.connections.append(conn)
        return conn

    @property
    def last_sql(self) -> str:
        return self.executed[-1][0]

    @property
    def last_params(self):
        return self.executed[-1][1]

    def all_closed(self) -> bool:
        return all(c.closed for c in self.connections)


@pytest.fixture
def fake_db(monkeypatch):
    db = FakeDatabase()
    monkeypatch.setattr(psycopg2, "connect", db.connect)
    db_connection.configure(TEST_CONFIG)
    yield db
    db_connection.reset()


class MemoryStudentRepository:
    """Dict-backed repository with the same interface as StudentRepository."""

    def __init__(self, schema_ok: bool = True, reachable: bool = True):
        self.rows: dict[int, tuple] = {}
        self.next_id = 1
        self.schema_ok = schema_ok
        self.reachable = reachable
        self.calls: list[str] = []

    def ensure_schema(self) -> bool:
        self.calls.append("ensure_schema")
        return self.schema_ok

    def test_connection(self) -> bool:
        self.calls.append("test_connection")
        return self.reachable

    def insert(self, student: Student) -> bool:
        self.calls.append("insert")
        if any(r[2] == student.email for r in self.rows.values()):
            return False
        student.id = self.next_id
        self.next_id += 1
        self.rows[student.id] = (student.id, student.name, student.email, student.age, student.course)
        return True

    def find_all(self) -> list[Student]:
        return [Student.from_row(self.rows[k]) for k in sorted(self.rows)]

    def find_by_id(self, student_id: int) -> StudentLookup:
        row = self.rows.get(student_id)
        return StudentLookup.of(Student.from_row(row)) if row else StudentLookup.absent()

    def find_by_email(self, email: str) -> StudentLookup:
        for row in self.rows.values():
            if row[2] == email:
                return StudentLookup.of(Student.from_row(row))
        return StudentLookup.absent()

    def update(self, student: Student) -> bool:
        self.calls.append("update")
        if student.id not in self.rows:
            return False
        self.rows[student.id] = (student.id, student.name, student.email, student.age, student.course)
        return True

    def delete(self, student_id: int) -> bool:
        self.calls.append("delete")
        return self.rows.pop(student_id, None) is not None

    def count(self) -> int:
        return len(self.rows)

    def search_by_name(self, fragment: str) -> list[Student]:
        matches = [r for r in self.rows.values() if fragment.lower() in r[1].lower()]
        return [Student.from_row(r) for r in sorted(matches, key=lambda r: (r[1].lower(), r[1], r[0]))]


@pytest.fixture
def memory_repo():
    return MemoryStudentRepository()


class ScriptedConsole:
    """Console double fed from a list of answers; collects everything shown."""

    def __init__(self, answers):
        from handlers.console import Console

        self._answers = iter(answers)
        self.output: list[str] = []
        self.prompts: list[str] = []
        self.console = Console(
            input_fn=self._next_answer,
            output_fn=self.output.append,
            clear_screen=False,
        )

    def _next_answer(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError("script exhausted")

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def scripted():
    return ScriptedConsole
