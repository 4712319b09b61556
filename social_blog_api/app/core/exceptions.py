"""
Persistence error types.

Every failure talking to the database surfaces as ``DatabaseError``.
Validation failures and missing rows are not exceptions; services
report them through ``ServiceResult``.
"""

import sqlite3
from typing import Optional


class DatabaseError(Exception):
    """A connection, SQL execution or transaction failure."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause

    @property
    def is_bad_input(self) -> bool:
        """True when the database rejected the data (constraint violation)."""
        return isinstance(self.cause, sqlite3.IntegrityError)


class RollbackError(DatabaseError):
    """Rolling back a failed write failed as well.

    ``original`` holds the error that triggered the rollback; ``cause``
    holds the rollback failure itself.
    """

    def __init__(self, message: str, original: BaseException, cause: BaseException) -> None:
        super().__init__(message, cause)
        self.original = original

    @property
    def is_bad_input(self) -> bool:
        return False
