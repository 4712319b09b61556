"""
Business logic for messages.

A message needs an existing author and a non-blank text of at most
``MAX_MESSAGE_LENGTH`` characters.  Only the text of a stored message
can change; its id, author and timestamp are fixed at creation.
"""

import logging
from typing import List, Optional

from social_blog_api.app.repositories.account_repository import AccountRepository
from social_blog_api.app.repositories.message_repository import MessageRepository
from social_blog_api.app.schemas.message import MessageCreate, MessageRead
from social_blog_api.app.services.result import ServiceResult

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 255


def _check_text(text: str) -> Optional[str]:
    """Return why ``text`` is unacceptable, or ``None`` if it is fine."""
    if not text.strip():
        return "message text is blank"
    if len(text) > MAX_MESSAGE_LENGTH:
        return f"message text exceeds {MAX_MESSAGE_LENGTH} characters"
    return None


class MessageService:
    """Create, read, update and delete messages."""

    def __init__(self, messages: MessageRepository, accounts: AccountRepository) -> None:
        self._messages = messages
        self._accounts = accounts

    def create(self, candidate: Optional[MessageCreate]) -> ServiceResult[MessageRead]:
        logger.info("Received request to post a new message")
        if candidate is None:
            logger.warning("Message creation failed: no message supplied")
            return ServiceResult.invalid("message is missing")
        if self._accounts.get_by_id(candidate.posted_by) is None:
            logger.warning("Message creation failed: account %s does not exist", candidate.posted_by)
            return ServiceResult.invalid(f"account {candidate.posted_by} does not exist")
        problem = _check_text(candidate.message_text)
        if problem:
            logger.warning("Message creation failed: %s", problem)
            return ServiceResult.invalid(problem)

        message = self._messages.insert(candidate)
        logger.info("Created message %s posted by %s", message.message_id, message.posted_by)
        return ServiceResult.success(message)

    def update_text(self, message_id: int, message_text: str) -> ServiceResult[MessageRead]:
        """Replace the text of a message.

        The text is checked before the lookup, so an invalid text on a
        missing message reports ``INVALID``.
        """
        logger.info("Received request to update message %s", message_id)
        problem = _check_text(message_text)
        if problem:
            logger.warning("Update of message %s failed: %s", message_id, problem)
            return ServiceResult.invalid(problem)
        existing = self._messages.get_by_id(message_id)
        if existing is None:
            logger.warning("Update failed: no message found with id %s", message_id)
            return ServiceResult.not_found(f"message {message_id} not found")

        updated = self._messages.update_text(existing, message_text)
        if updated is None:
            return ServiceResult.not_found(f"message {message_id} not found")
        logger.info("Updated message %s", message_id)
        return ServiceResult.success(updated)

    def delete_by_id(self, message_id: int) -> None:
        """Delete a message if it exists.  Missing ids are ignored."""
        logger.info("Received request to delete message %s", message_id)
        if not self._messages.delete_by_id(message_id):
            logger.info("Message %s did not exist, nothing deleted", message_id)

    def get_by_id(self, message_id: int) -> ServiceResult[MessageRead]:
        message = self._messages.get_by_id(message_id)
        if message is None:
            logger.warning("No message found with id %s", message_id)
            return ServiceResult.not_found(f"message {message_id} not found")
        return ServiceResult.success(message)

    def get_all(self) -> List[MessageRead]:
        return self._messages.get_all()

    def get_all_by_author(self, account_id: int) -> List[MessageRead]:
        return self._messages.get_all_by_author(account_id)
