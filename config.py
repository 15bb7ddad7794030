"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.

Connection credentials have no built-in defaults: DB_NAME and DB_USER
must be supplied, and are turned into a DatabaseConfig at startup.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class ConfigError(Exception):
    """Raised when required configuration is missing or malformed."""


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: str = os.getenv("DB_PORT", "5432")
DB_NAME: str = os.getenv("DB_NAME", "")
DB_USER: str = os.getenv("DB_USER", "")
DB_PASS: str = os.getenv("DB_PASS", "")
DB_MAINTENANCE_NAME: str = os.getenv("DB_MAINTENANCE_NAME", "postgres")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Connection parameters for the PostgreSQL server.

    Attributes:
        host: Server hostname.
        port: Server port.
        database: Application database holding the students table.
        user: Login role.
        password: Password for `user` (may be empty for trust/peer auth).
        maintenance_database: Database used to create `database` if absent.
    """
    host: str
    port: int
    database: str
    user: str
    password: str = ""
    maintenance_database: str = "postgres"

    def connect_kwargs(self, database: Optional[str] = None) -> dict:
        """Keyword arguments for psycopg2.connect()."""
        return {
            "host": self.host,
            "port": self.port,
            "dbname": database or self.database,
            "user": self.user,
            "password": self.password,
        }

    def __repr__(self) -> str:
        return (
            f"DatabaseConfig(host={self.host!r}, port={self.port}, "
            f"database={self.database!r}, user={self.user!r})"
        )


def load_database_config(env: Optional[dict] = None) -> DatabaseConfig:
    """
    Build a DatabaseConfig from environment variables.

    Args:
        env: Mapping to read from. Defaults to the module-level constants
            loaded from the process environment / .env file.

    Raises:
        ConfigError: If DB_NAME or DB_USER is missing, or DB_PORT is not an integer.
    """
    if env is None:
        env = {
            "DB_HOST": DB_HOST,
            "DB_PORT": DB_PORT,
            "DB_NAME": DB_NAME,
            "DB_USER": DB_USER,
            "DB_PASS": DB_PASS,
            "DB_MAINTENANCE_NAME": DB_MAINTENANCE_NAME,
        }

    missing = [key for key in ("DB_NAME", "DB_USER") if not env.get(key)]
    if missing:
        raise ConfigError(f"Missing required setting(s): {', '.join(missing)}")

    raw_port = env.get("DB_PORT") or "5432"
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigError(f"DB_PORT must be an integer, got {raw_port!r}")

    return DatabaseConfig(
        host=env.get("DB_HOST") or "localhost",
        port=port,
        database=env["DB_NAME"],
        user=env["DB_USER"],
        password=env.get("DB_PASS") or "",
        maintenance_database=env.get("DB_MAINTENANCE_NAME") or "postgres",
    )
