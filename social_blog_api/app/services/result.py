"""
Tagged result returned by service operations that can fail.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ResultStatus(str, Enum):
    OK = "ok"
    INVALID = "invalid"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Outcome of a service call.

    ``value`` is set only when ``status`` is ``OK``; ``reason`` explains
    a rejection and is meant for logs, not for clients.
    """

    status: ResultStatus
    value: Optional[T] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(ResultStatus.OK, value=value)

    @classmethod
    def invalid(cls, reason: str) -> "ServiceResult[T]":
        return cls(ResultStatus.INVALID, reason=reason)

    @classmethod
    def not_found(cls, reason: str) -> "ServiceResult[T]":
        return cls(ResultStatus.NOT_FOUND, reason=reason)
