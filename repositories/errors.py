"""
repositories/errors.py
----------------------
Error taxonomy shared by all repositories.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ZERO_ROWS = "zero_rows"
    INFRASTRUCTURE = "infrastructure"


class DAOError(Exception):
    """
    Raised when a repository operation did not complete as requested.

    Callers branch on ``kind``; ``cause`` holds the underlying exception
    for infrastructure failures.
    """

    def __init__(self, kind: ErrorKind, message: str, cause: Optional[BaseException] = None):
        super().__init__(kind, message, cause)
        self.message = message
        self.kind = kind
        self.cause = cause

    @classmethod
    def validation(cls, message: str) -> "DAOError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, message: str) -> "DAOError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def zero_rows(cls, message: str) -> "DAOError":
        return cls(ErrorKind.ZERO_ROWS, message)

    @classmethod
    def infrastructure(cls, cause: BaseException) -> "DAOError":
        return cls(ErrorKind.INFRASTRUCTURE, f"Database error: {cause}", cause)

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"
