"""
db/init_db.py
-------------
Creates the application database and the students table if they do not
already exist. Run this module directly to initialize a fresh server:
    python -m db.init_db
"""

from psycopg2 import sql

from db.connection import connection, get_config
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Students table: one row per student, email is the natural key
CREATE TABLE IF NOT EXISTS students (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(100) NOT NULL,
    email           VARCHAR(150) NOT NULL UNIQUE,
    age             INT NOT NULL,
    course          VARCHAR(100) NOT NULL
);
"""

_DATABASE_EXISTS_SQL = "SELECT 1 FROM pg_database WHERE datname = %s;"


def create_database() -> bool:
    """
    Create the configured database on the server if it is missing.
    CREATE DATABASE cannot run inside a transaction, so this uses an
    autocommit connection to the maintenance database.

    Returns:
        True if the database was created, False if it already existed.

    Raises:
        psycopg2.Error: If the server is unreachable or the role lacks CREATEDB.
    """
    config = get_config()
    with connection(config.maintenance_database, autocommit=True) as conn:
        with conn.cursor() as cur:
            cur.execute(_DATABASE_EXISTS_SQL, (config.database,))
            if cur.fetchone():
                return False
            cur.execute(
                sql.SQL("CREATE DATABASE {}").format(sql.Identifier(config.database))
            )
    logger.info(f"Created database '{config.database}'.")
    return True


def create_tables() -> None:
    """
    Execute the schema SQL to create the students table.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    with connection() as conn:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from config import load_database_config
    from db.connection import configure

    configure(load_database_config())
    create_database()
    create_tables()
    print("✅ Database schema created successfully.")
