"""Error Hierarchy — typed, categorized exceptions for all Finboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError is raised before any store call; StorageError after one failed
    - StorageError messages are fixed and backend-agnostic; the backend detail
      lives in __cause__ and in context.debug_info, never in the message
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with FinboardError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
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
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    invoice_id: str | None = None
    debug_info: dict[str, Any] | None = None


class FinboardError(Exception):
    """Base exception for all Finboard errors."""

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
                "context": {
                    "operation": self.context.operation,
                    "invoice_id": self.context.invoice_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(FinboardError):
    """Form input is missing, malformed, or outside the allowed values."""
    def __init__(
        self,
        field_errors: dict[str, list[str]],
        message: str = "Missing Fields. Failed to validate invoice form.",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field_errors = field_errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["field_errors"] = self.field_errors
        return response


class AuthenticationError(FinboardError):
    """Credential sign-in failed. kind distinguishes the failure shape."""
    CREDENTIALS_SIGNIN = "CredentialsSignin"

    def __init__(
        self, kind: str, message: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message or f"Authentication failed ({kind})",
            "AUTHENTICATION_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.kind = kind


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(FinboardError):
    """Store call failed or returned no matching row."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
