"""
SQLite database integration and simple migration system.

This module provides the ``ConnectionProvider`` handed to every
repository, the ``transaction`` helper used for writes, and
``init_db`` which applies migrations on application start.

Connections are opened in auto-commit mode (``isolation_level=None``)
so plain reads never hold a transaction open.  Writes switch
auto-commit off for the duration of ``transaction`` and restore it
before the connection is released.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import Settings, settings as default_settings
from .exceptions import DatabaseError, RollbackError

logger = logging.getLogger(__name__)

# Range of an SQLite INTEGER; larger Python ints cannot be bound as parameters.
SQLITE_INTEGER_MIN = -(2 ** 63)
SQLITE_INTEGER_MAX = 2 ** 63 - 1


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS account (
            account_id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL,
            password TEXT NOT NULL,
            UNIQUE(username, password)
        );

        CREATE TABLE IF NOT EXISTS message (
            message_id INTEGER PRIMARY KEY AUTOINCREMENT,
            posted_by INTEGER NOT NULL,
            message_text TEXT NOT NULL,
            time_posted_epoch INTEGER NOT NULL,
            FOREIGN KEY(posted_by) REFERENCES account(account_id)
        );
        """,
    ),
    # Migration 2: author lookups back GET /accounts/{id}/messages
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_message_posted_by ON message(posted_by);
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative ones are resolved against
    the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # social_blog_api/
    return str((base_dir / database_url).resolve())


class ConnectionProvider:
    """Hands out one fresh SQLite connection per operation."""

    def __init__(self, database_path: str, timeout: float = 5.0) -> None:
        self.database_path = database_path
        self.timeout = timeout

    @classmethod
    def from_settings(cls, config: Settings = default_settings) -> "ConnectionProvider":
        return cls(resolve_database_path(config.database_url), timeout=config.database_timeout)

    def connect(self) -> sqlite3.Connection:
        """Open a connection with name-addressable rows and foreign keys on."""
        try:
            conn = sqlite3.connect(self.database_path, timeout=self.timeout, isolation_level=None)
        except sqlite3.Error as exc:
            logger.error("Could not open database %s: %s", self.database_path, exc)
            raise DatabaseError("Error while establishing database connection", exc) from exc
        conn.row_factory = sqlite3.Row
        try:
            # SQLite ignores REFERENCES clauses unless this is set per connection.
            conn.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as exc:
            conn.close()
            raise DatabaseError("Error while enabling foreign key enforcement", exc) from exc
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection and close it on every exit path."""
        conn = self.connect()
        try:
            yield conn
        finally:
            conn.close()


@contextmanager
def database_errors(action: str) -> Iterator[None]:
    """Wrap ``sqlite3.Error`` raised inside the block into ``DatabaseError``."""
    try:
        yield
    except sqlite3.Error as exc:
        logger.error("Failed to %s: %s", action, exc)
        raise DatabaseError(f"Failed to {action}", exc) from exc


@contextmanager
def transaction(conn, action: str) -> Iterator[None]:
    """Run the block as one transaction on ``conn``.

    Auto-commit is switched off on entry.  The transaction commits if
    the block completes and rolls back on any exception.  A failing
    rollback raises ``RollbackError``; other ``sqlite3.Error``s are
    wrapped into ``DatabaseError``.

    Auto-commit is restored on exit only once no transaction is open:
    assigning ``isolation_level = None`` mid-transaction makes sqlite3
    COMMIT.  After a failed rollback the transaction is left open and
    closing the connection discards it.
    """
    conn.isolation_level = "DEFERRED"
    try:
        yield
        conn.commit()
    except Exception as exc:
        try:
            conn.rollback()
        except sqlite3.Error as rollback_exc:
            logger.error("Rollback failed while trying to %s: %s", action, rollback_exc)
            raise RollbackError(
                f"Transaction failed and could not be rolled back, original error: {exc}",
                original=exc,
                cause=rollback_exc,
            ) from rollback_exc
        logger.error("Transaction rolled back, failed to %s: %s", action, exc)
        if isinstance(exc, sqlite3.Error):
            raise DatabaseError(f"Failed to {action}", exc) from exc
        raise
    finally:
        if not conn.in_transaction:
            conn.isolation_level = None


def init_db(provider: ConnectionProvider) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  To add a migration, append it with an incremented
    version number.
    """
    with database_errors("apply migrations"), provider.connection() as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) AS version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied migration %s", version)
                    current_version = version
        finally:
            cursor.close()
