"""
SQL access for the ``message`` table.

Writes run inside ``transaction``; reads run in auto-commit mode and
return ``None`` or an empty list when nothing matches.
"""

import logging
import sqlite3
from typing import List, Optional

from social_blog_api.app.core.db import ConnectionProvider, database_errors, transaction
from social_blog_api.app.schemas.message import MessageCreate, MessageRead

logger = logging.getLogger(__name__)

_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"


def _row_to_message(row: sqlite3.Row) -> MessageRead:
    return MessageRead(
        message_id=row["message_id"],
        posted_by=row["posted_by"],
        message_text=row["message_text"],
        time_posted_epoch=row["time_posted_epoch"],
    )


class MessageRepository:
    """CRUD operations over messages."""

    def __init__(self, provider: ConnectionProvider) -> None:
        self._provider = provider

    def insert(self, data: MessageCreate) -> MessageRead:
        """Insert a message and return it with its generated id."""
        with self._provider.connection() as conn:
            cursor = conn.cursor()
            try:
                with transaction(conn, "create message"):
                    cursor.execute(
                        "INSERT INTO message (posted_by, message_text, time_posted_epoch) VALUES (?, ?, ?)",
                        (data.posted_by, data.message_text, data.time_posted_epoch),
                    )
                    message_id = cursor.lastrowid
            finally:
                cursor.close()
        logger.info("Inserted message %s posted by %s", message_id, data.posted_by)
        return MessageRead(message_id=message_id, **data.model_dump())

    def get_all(self) -> List[MessageRead]:
        with database_errors("list messages"), self._provider.connection() as conn:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM message ORDER BY message_id").fetchall()
        return [_row_to_message(row) for row in rows]

    def get_by_id(self, message_id: int) -> Optional[MessageRead]:
        if message_id <= 0:
            return None
        with database_errors(f"get message {message_id}"), self._provider.connection() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
        return _row_to_message(row) if row else None

    def get_all_by_author(self, account_id: int) -> List[MessageRead]:
        if account_id <= 0:
            return []
        with database_errors(f"list messages of account {account_id}"), self._provider.connection() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM message WHERE posted_by = ? ORDER BY message_id",
                (account_id,),
            ).fetchall()
        return [_row_to_message(row) for row in rows]

    def update_text(self, message: MessageRead, message_text: str) -> Optional[MessageRead]:
        """Overwrite the text of ``message``.

        Returns the message with the new text, or ``None`` if the row
        vanished before the update ran.
        """
        with self._provider.connection() as conn:
            cursor = conn.cursor()
            try:
                with transaction(conn, f"update message {message.message_id}"):
                    cursor.execute(
                        "UPDATE message SET message_text = ? WHERE message_id = ?",
                        (message_text, message.message_id),
                    )
                    updated = cursor.rowcount
            finally:
                cursor.close()
        if updated == 0:
            logger.warning("No message %s to update", message.message_id)
            return None
        logger.info("Updated text of message %s", message.message_id)
        return message.model_copy(update={"message_text": message_text})

    def delete_by_id(self, message_id: int) -> bool:
        """Delete a message.  Returns whether a row was removed."""
        if message_id <= 0:
            return False
        with self._provider.connection() as conn:
            cursor = conn.cursor()
            try:
                with transaction(conn, f"delete message {message_id}"):
                    cursor.execute("DELETE FROM message WHERE message_id = ?", (message_id,))
                    deleted = cursor.rowcount > 0
            finally:
                cursor.close()
        if deleted:
            logger.info("Deleted message %s", message_id)
        return deleted
