"""Unified error kinds and custom exceptions.

Every failure the service reports belongs to exactly one ErrorKind. The kind
decides the HTTP status and the ``error`` category string of the response body;
translation to the transport happens only in the exception handlers of src.main.

Error code ranges (used in logs):
  1xxx: Request validation
  2xxx: Account
  9xxx: System
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION_FIELD = "VALIDATION_FIELD"
    VALIDATION = "VALIDATION"
    ACCOUNT_LIMIT_EXCEEDED = "ACCOUNT_LIMIT_EXCEEDED"
    OFFENSIVE_NICKNAME = "OFFENSIVE_NICKNAME"
    NOT_FOUND = "NOT_FOUND"
    DATABASE_OPERATION = "DATABASE_OPERATION"
    UNEXPECTED = "UNEXPECTED"


# kind -> (http_status, category shown in the "error" field)
ERROR_CATEGORIES: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.VALIDATION_FIELD: (400, "Validation Failed"),
    ErrorKind.VALIDATION: (400, "Validation Error"),
    ErrorKind.ACCOUNT_LIMIT_EXCEEDED: (400, "Bad Request"),
    ErrorKind.OFFENSIVE_NICKNAME: (400, "Bad Request"),
    ErrorKind.NOT_FOUND: (404, "Not Found"),
    ErrorKind.DATABASE_OPERATION: (500, "Database Error"),
    ErrorKind.UNEXPECTED: (500, "Internal Server Error"),
}


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        kind: ErrorKind = ErrorKind.UNEXPECTED,
    ) -> None:
        self.code = code
        self.message = message
        self.kind = kind
        super().__init__(message)

    @property
    def http_status(self) -> int:
        return ERROR_CATEGORIES[self.kind][0]

    @property
    def category(self) -> str:
        return ERROR_CATEGORIES[self.kind][1]


# --- 1xxx: Request validation ---
# Field-level failures (VALIDATION_FIELD) come from FastAPI's
# RequestValidationError and are mapped in src.main without an AppError.

class ValidationError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(1001, message, ErrorKind.VALIDATION)


# --- 2xxx: Account ---

class AccountLimitExceededError(AppError):
    def __init__(self, limit: int) -> None:
        super().__init__(
            2001,
            f"Customer has reached the maximum allowed number of accounts ({limit})",
            ErrorKind.ACCOUNT_LIMIT_EXCEEDED,
        )


class OffensiveNicknameError(AppError):
    def __init__(self) -> None:
        super().__init__(
            2002,
            "Account nickname contains offensive language",
            ErrorKind.OFFENSIVE_NICKNAME,
        )


class AccountNotFoundError(AppError):
    def __init__(self, field: str, value: str) -> None:
        super().__init__(
            2003, f"Account with {field} {value} not found.", ErrorKind.NOT_FOUND
        )


class AccountNumberConflictError(AppError):
    """The store rejected an insert because the account number is already taken."""

    def __init__(self, account_number: str) -> None:
        super().__init__(
            2004,
            f"Account number already taken: {account_number}",
            ErrorKind.DATABASE_OPERATION,
        )


# --- 9xxx: System ---

class DatabaseOperationError(AppError):
    """Storage access failed. The original error is chained as __cause__."""

    def __init__(self, message: str) -> None:
        super().__init__(9001, message, ErrorKind.DATABASE_OPERATION)

