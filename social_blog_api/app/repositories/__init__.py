"""
Persistence layer.

Each repository owns the SQL for one table and receives its
``ConnectionProvider`` at construction.  Repositories apply no
business rules: they insert, select, update and delete rows and
translate driver failures into ``DatabaseError``.
"""

from .account_repository import AccountRepository
from .message_repository import MessageRepository

__all__ = ["AccountRepository", "MessageRepository"]
