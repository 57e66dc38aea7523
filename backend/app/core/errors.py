"""Error Hierarchy — closed set of tagged failures for every Exercise Tracker endpoint.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status and the exact plain-text message clients see
    - Client errors (400-level) are expected input problems; InternalError is the only 500
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TrackerError base: one FastAPI handler renders all variants
      (ADR: no shape-sniffing of ad hoc error objects)
    - NotFoundError covers both unknown user references (400) and unmatched routes (404);
      the two factories fix status and message so call sites never choose them
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    field_name: str | None = None
    debug_info: dict[str, Any] | None = None


class TrackerError(Exception):
    """Base exception for all Exercise Tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> str:
        """Plain-text body sent to the client (single line, never structured)."""
        return self.message

    def to_log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "user_id": self.context.user_id,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(TrackerError):
    """A field constraint was violated. Message is the first failing field's message."""
    def __init__(
        self,
        message: str,
        field: str,
        field_errors: dict[str, str] | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field = field
        self.field_errors = field_errors or {field: message}

    @classmethod
    def from_field_errors(cls, field_errors: dict[str, str]) -> "ValidationError":
        """Build from an ordered field → message mapping; the first entry wins."""
        field_name, message = next(iter(field_errors.items()))
        return cls(message, field_name, dict(field_errors))


class DuplicateKeyError(TrackerError):
    """Uniqueness constraint violated (only username is unique)."""
    def __init__(self, field: str = "username", context: ErrorContext | None = None):
        super().__init__(
            "Username taken", "DUPLICATE_KEY", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class NotFoundError(TrackerError):
    """Referenced resource or route does not exist."""

    @classmethod
    def unknown_user(cls, user_id: str | None) -> "NotFoundError":
        """A userId that matches no User is a client input error (400, not 404)."""
        return cls(
            "Unknown UserID", "UNKNOWN_USER", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ErrorContext(user_id=user_id), 400,
        )

    @classmethod
    def route(cls) -> "NotFoundError":
        """No route and no static asset matched the request."""
        return cls(
            "Not Found", "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, None, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InternalError(TrackerError):
    """Any persistence or unexpected failure."""
    def __init__(
        self,
        message: str = "Internal Server Error",
        operation: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    @classmethod
    def database(cls, operation: str, cause: Exception) -> "InternalError":
        """Persistence failure; the cause is kept for logs, never for the client."""
        err = cls(operation=operation, context=ErrorContext(
            debug_info={"operation": operation, "cause": repr(cause)},
        ))
        err.category = ErrorCategory.DATABASE
        return err
