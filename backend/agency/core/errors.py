"""Error Hierarchy — typed, categorized exceptions for all site failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with AgencyError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data travels with the error, not the logger
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    slug: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class AgencyError(Exception):
    """Base exception for all site errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(AgencyError):
    """Malformed or missing input, with per-field messages."""
    def __init__(
        self,
        message: str,
        field_errors: dict[str, list[str]] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field_errors = field_errors or {}

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = {"validation_errors": self.field_errors}
        return response


class NotFoundError(AgencyError):
    """Requested resource does not exist (or is not visible yet)."""
    def __init__(self, resource: str, context: ErrorContext | None = None):
        super().__init__(
            f"{resource} not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource = resource


class ConflictError(AgencyError):
    """Uniqueness violated — the record already exists."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class AuthenticationError(AgencyError):
    """Missing, invalid or expired admin credentials."""
    def __init__(
        self, message: str = "Authentication required",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(AgencyError):
    """Signed in, but the admin role does not allow the operation."""
    def __init__(
        self, message: str = "You do not have permission to do this",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "PERMISSION_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(AgencyError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class EmailDeliveryError(AgencyError):
    """Email provider rejected or never received the message."""
    def __init__(
        self, message: str, status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Email delivery failed: {message}",
            "EMAIL_DELIVERY_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.status_code = status_code


def format_validation_errors(errors: list[dict]) -> dict[str, list[str]]:
    """Group pydantic error dicts by dotted field path."""
    formatted: dict[str, list[str]] = {}
    for err in errors:
        path = ".".join(str(loc) for loc in err.get("loc", ()) if loc != "body")
        formatted.setdefault(path or "__root__", []).append(err["msg"])
    return formatted
