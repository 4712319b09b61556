"""
SQL access for the ``account`` table.
"""

import logging
import sqlite3
from typing import List, Optional

from social_blog_api.app.core.db import ConnectionProvider, database_errors, transaction
from social_blog_api.app.schemas.account import AccountCredentials, AccountRead

logger = logging.getLogger(__name__)


def _row_to_account(row: sqlite3.Row) -> AccountRead:
    return AccountRead(
        account_id=row["account_id"],
        username=row["username"],
        password=row["password"],
    )


class AccountRepository:
    """Insert and look up accounts."""

    def __init__(self, provider: ConnectionProvider) -> None:
        self._provider = provider

    def insert(self, data: AccountCredentials) -> AccountRead:
        """Insert an account and return it with its generated id."""
        with self._provider.connection() as conn:
            cursor = conn.cursor()
            try:
                with transaction(conn, "create account"):
                    cursor.execute(
                        "INSERT INTO account (username, password) VALUES (?, ?)",
                        (data.username, data.password),
                    )
                    account_id = cursor.lastrowid
            finally:
                cursor.close()
        logger.info("Inserted account %s (%s)", account_id, data.username)
        return AccountRead(account_id=account_id, username=data.username, password=data.password)

    def get_all(self) -> List[AccountRead]:
        with database_errors("list accounts"), self._provider.connection() as conn:
            rows = conn.execute(
                "SELECT account_id, username, password FROM account ORDER BY account_id"
            ).fetchall()
        return [_row_to_account(row) for row in rows]

    def get_by_id(self, account_id: int) -> Optional[AccountRead]:
        if account_id <= 0:
            return None
        with database_errors(f"get account {account_id}"), self._provider.connection() as conn:
            row = conn.execute(
                "SELECT account_id, username, password FROM account WHERE account_id = ?",
                (account_id,),
            ).fetchone()
        return _row_to_account(row) if row else None

    def get_by_credentials(self, data: AccountCredentials) -> Optional[AccountRead]:
        """Find the account matching username and password exactly.

        SQLite compares TEXT with the BINARY collation, so the match
        is case-sensitive.
        """
        with database_errors(f"get account {data.username!r}"), self._provider.connection() as conn:
            row = conn.execute(
                "SELECT account_id, username, password FROM account WHERE username = ? AND password = ?",
                (data.username, data.password),
            ).fetchone()
        return _row_to_account(row) if row else None
