"""
Service layer.

Each service validates input and enforces business rules for one
entity before delegating to its repository.  Outcomes that are part
of normal operation (rejected input, missing rows) come back as a
``ServiceResult``; only persistence failures raise.
"""

from .account_service import AccountService
from .message_service import MessageService
from .result import ResultStatus, ServiceResult

__all__ = ["AccountService", "MessageService", "ResultStatus", "ServiceResult"]
