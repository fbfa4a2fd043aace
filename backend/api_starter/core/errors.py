"""Error Hierarchy — typed, categorized exceptions raised inside request handling.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - http_status is the status the Error Responder answers with
    - User-facing text lives in .message; internals never go into it

Design Decisions:
    - Single hierarchy with ApiStarterError base: the terminal error boundary
      resolves status/message from these attributes without isinstance ladders
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CORS = "cors"
    INTERNAL = "internal"


class ApiStarterError(Exception):
    """Base exception for all API Starter errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status


# ─── Request Errors ─────────────────────────────────────────────

class CorsOriginDeniedError(ApiStarterError):
    """Request origin is not in the allowed set (production only)."""
    def __init__(self, origin: str):
        super().__init__(
            "Not allowed by CORS", "CORS_ORIGIN_DENIED", ErrorCategory.CORS,
            ErrorSeverity.WARNING, 500,
        )
        self.origin = origin


class BadRequestError(ApiStarterError):
    """Request body or parameters could not be accepted."""
    def __init__(self, message: str = "Invalid request data"):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )

