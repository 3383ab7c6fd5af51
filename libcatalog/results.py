from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Reasons a catalog command can fail."""
    USER_NOT_FOUND = "UserNotFound"
    BOOK_NOT_FOUND = "BookNotFound"
    ALREADY_BORROWED = "AlreadyBorrowed"
    NEVER_BORROWED = "NeverBorrowed"
    NOTHING_BORROWED = "NothingBorrowed"
    NOT_BORROWED_BY_USER = "NotBorrowedByUser"
    DUPLICATE_IDENTIFIER = "DuplicateIdentifier"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a command: either a success or exactly one error code."""
    success: bool
    message: str
    user_name: Optional[str] = None
    title: Optional[str] = None
    error: Optional[ErrorCode] = None

    @classmethod
    def ok(cls, message: str, *, user_name: Optional[str] = None, title: Optional[str] = None) -> "OperationResult":
        return cls(success=True, message=message, user_name=user_name, title=title)

    @classmethod
    def fail(cls, error: ErrorCode, message: str) -> "OperationResult":
        return cls(success=False, message=message, error=error)

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "user_name": self.user_name,
            "title": self.title,
            "error": self.error.value if self.error else None,
        }
