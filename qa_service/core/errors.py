"""Error Hierarchy — DAO failure kinds and the transport errors they map to.

Invariants:
    - DAOs raise exactly two kinds: InvalidIdentifierError, StoreFailureError
    - Handlers raise exactly two kinds: BadRequestError (400), InternalError (500)
    - InvalidIdentifierError message passes through verbatim to the client
    - StoreFailureError detail never reaches the client (generic message instead)

Design Decisions:
    - DBError hierarchy is transport-agnostic: persistence never knows HTTP codes
    - Single QAServiceError base for transport errors: one FastAPI handler renders all
      (uniform error envelope)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

GENERIC_INTERNAL_MESSAGE = "Something went wrong! Please try again."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


# ─── Persistence Errors ─────────────────────────────────────────

class DBError(Exception):
    """Base exception for every failure surfaced by a DAO."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidIdentifierError(DBError):
    """Nil or otherwise unusable identifier. Raised before touching the store."""


class StoreFailureError(DBError):
    """Any failure from the underlying store (connection, timeout, constraint)."""

    def __init__(self, detail: str, operation: str):
        super().__init__(f"Database {operation} failed: {detail}")
        self.detail = detail
        self.operation = operation


# ─── Transport Errors ───────────────────────────────────────────

@dataclass
class ErrorContext:
    """Context attached to a transport error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class QAServiceError(Exception):
    """Base exception for errors rendered at the HTTP boundary."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


class BadRequestError(QAServiceError):
    """Client fault — the message is shown to the caller as-is."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InternalError(QAServiceError):
    """Server fault — carries a generic message, never store detail."""
    def __init__(
        self, message: str = GENERIC_INTERNAL_MESSAGE,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


def to_handler_error(exc: DBError) -> QAServiceError:
    """Map a DAO failure onto its transport category."""
    if isinstance(exc, InvalidIdentifierError):
        return BadRequestError(exc.message)
    return InternalError()
