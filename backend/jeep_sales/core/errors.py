"""Error Hierarchy — typed, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), http_status (int)
    - Client errors (400/404) carry a caller-safe message; internal errors (500)
      always render the generic INTERNAL_MESSAGE
    - to_response() produces the uniform error envelope:
      {message, "status code", uri, timestamp, reason}

Design Decisions:
    - Single hierarchy with JeepSalesError base: one global handler renders all
    - ErrorContext as dataclass: timestamp captured when the error is raised
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from http import HTTPStatus
from typing import Any


INTERNAL_MESSAGE = "An unexpected error occurred"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and observability."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context captured at raise time."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    debug_info: dict[str, Any] | None = None


def build_error_body(
    http_status: int, message: str, uri: str, timestamp: datetime | None = None,
) -> dict:
    """Uniform error payload shared by domain and framework error handlers."""
    when = timestamp or datetime.now(timezone.utc)
    return {
        "message": message,
        "status code": http_status,
        "uri": uri,
        "timestamp": when.isoformat(),
        "reason": HTTPStatus(http_status).phrase,
    }


class JeepSalesError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def public_message(self) -> str:
        """Message safe to show the caller."""
        if self.http_status >= 500:
            return INTERNAL_MESSAGE
        return self.message

    def to_response(self, uri: str) -> dict:
        """Convert to the REST error envelope for the given request path."""
        return build_error_body(
            self.http_status, self.public_message, uri, self.context.timestamp,
        )


# ─── Client Errors (400/404) ─────────────────────────────────────

class InvalidModelError(JeepSalesError):
    """Model parameter missing or not a known JeepModel."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_MODEL", ErrorCategory.VALIDATION, context, 400,
        )
        self.field = "model"


class InvalidTrimError(JeepSalesError):
    """Trim parameter missing, too long, or containing illegal characters."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_TRIM", ErrorCategory.VALIDATION, context, 400,
        )
        self.field = "trim"


class JeepNotFoundError(JeepSalesError):
    """No catalog entry matches the requested model and trim."""
    def __init__(self, model: str, trim: str, context: ErrorContext | None = None):
        super().__init__(
            f"No Jeeps with model ID={model} and trim={trim} were found",
            "JEEP_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, context, 404,
        )
        self.model = model
        self.trim = trim


# ─── Server Errors (500) ─────────────────────────────────────────

class InternalError(JeepSalesError):
    """Unclassified downstream fault. Detail stays in the logs."""
    def __init__(self, detail: str = INTERNAL_MESSAGE, context: ErrorContext | None = None):
        super().__init__(
            detail, "INTERNAL_ERROR", ErrorCategory.INTERNAL, context, 500,
        )


class DatabaseError(JeepSalesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, context, 500,
        )
        self.operation = operation
