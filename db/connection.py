"""
db/connection.py
----------------
Opens and releases PostgreSQL connections.

There is no pool: every data-access call opens its own connection through
`connection()` and the connection is closed again before the call returns.
Connection parameters are injected once at startup with `configure()`.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2

from config import DatabaseConfig
from utils.logger import get_logger

logger = get_logger(__name__)

_config: DatabaseConfig | None = None


def configure(config: DatabaseConfig) -> None:
    """
    Set the connection parameters used by every later connection.

    Args:
        config: Host, port, database and credentials for the server.
    """
    global _config
    _config = config
    logger.info(f"Database configured: {config!r}")


def get_config() -> DatabaseConfig:
    """
    Return the injected connection parameters.

    Raises:
        RuntimeError: If `configure()` has not been called.
    """
    if _config is None:
        raise RuntimeError("Database not configured. Call configure() first.")
    return _config


def get_connection(database: Optional[str] = None):
    """
    Open a new connection.

    Args:
        database: Connect to this database instead of the configured one.

    Returns:
        A psycopg2 connection object.

    Raises:
        psycopg2.OperationalError: If the server is unreachable.
    """
    return psycopg2.connect(**get_config().connect_kwargs(database))


def release_connection(conn) -> None:
    """
    Close a connection opened by `get_connection()`.

    Args:
        conn: The psycopg2 connection to release (None is ignored).
    """
    if conn is not None and not conn.closed:
        conn.close()


@contextmanager
def connection(database: Optional[str] = None, autocommit: bool = False) -> Iterator:
    """
    Scoped connection: commit on success, roll back on error, always close.

    Usage:
        with connection() as conn:
            with conn.cursor() as cur:
                cur.execute(...)
    """
    conn = get_connection(database)
    try:
        conn.autocommit = autocommit
        yield conn
        if not autocommit:
            conn.commit()
    except Exception:
        if not autocommit and not conn.closed:
            conn.rollback()
        raise
    finally:
        release_connection(conn)


def reset() -> None:
    """Forget the injected configuration."""
    global _config
    if _config is not None:
        _config = None
        logger.info("Database configuration cleared.")
