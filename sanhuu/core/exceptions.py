"""Custom exception hierarchy for Sanhuu.

Every error raised by the reporting engine derives from ``SanhuuException`` so the
API layer can translate it into a single ``{"error": ..., "code": ...}`` response.
Messages are user-facing and written in Mongolian, matching the rest of the UI.

Error codes follow pattern: [CATEGORY][NUMBER]
- INP: Invalid input (100-199)
- CFG: Missing or invalid configuration (200-299)
- TRX: Transaction lookups (300-399)
- USR: Caller identity (400-499)
- SYS: System errors (500-599)
"""

from __future__ import annotations

from typing import Any


class SanhuuException(Exception):
    """Base exception for all Sanhuu application errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with user-friendly message and metadata.

        Args:
            message: User-friendly error message
            code: Unique error code (e.g., "INP100")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        body: dict[str, Any] = {
            "error": self.message,
            "code": self.code,
            "success": False,
        }
        if self.details:
            body["details"] = self.details
        return body


# ============================================================================
# INPUT ERRORS (INP100-199)
# ============================================================================

class InvalidInputError(SanhuuException):
    """Malformed or out-of-range request field."""

    def __init__(self, message: str, field: str | None = None, code: str = "INP100"):
        super().__init__(
            message=message,
            code=code,
            status_code=400,
            details={"field": field} if field else {},
        )


class InvalidPeriodError(InvalidInputError):
    """Year, quarter or month selector outside its valid domain."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message=message, field=field, code="INP101")


class InvalidWorkDaysError(InvalidInputError):
    """Work day counts that would make salary proration meaningless."""

    def __init__(self, message: str, field: str):
        super().__init__(message=message, field=field, code="INP102")


# ============================================================================
# CONFIGURATION ERRORS (CFG200-299)
# ============================================================================

class MissingConfigurationError(SanhuuException):
    """No company tax profile was supplied for a report that needs one."""

    def __init__(self, parameter: str = "companySettings"):
        super().__init__(
            message="Компанийн тохиргоо олдсонгүй",
            code="CFG200",
            status_code=400,
            details={"parameter": parameter},
        )


# ============================================================================
# TRANSACTION ERRORS (TRX300-399)
# ============================================================================

class NotFoundError(SanhuuException):
    """Referenced transaction is absent from the supplied list."""

    def __init__(self, transaction_id: str | None = None):
        super().__init__(
            message="Гүйлгээ олдсонгүй",
            code="TRX300",
            status_code=404,
            details={"transaction_id": transaction_id} if transaction_id else {},
        )


# ============================================================================
# USER/AUTH ERRORS (USR400-499)
# ============================================================================

class UnauthorizedError(SanhuuException):
    """No valid caller identity accompanied the request."""

    def __init__(self, reason: str | None = None):
        super().__init__(
            message="Unauthorized",
            code="USR400",
            status_code=401,
            details={"reason": reason} if reason else {},
        )


# ============================================================================
# SYSTEM ERRORS (SYS500-599)
# ============================================================================

class InternalError(SanhuuException):
    """Unexpected failure while aggregating or serializing a report."""

    def __init__(self, correlation_id: str | None = None):
        super().__init__(
            message="Тайлан боловсруулахад алдаа гарлаа",
            code="SYS500",
            status_code=500,
            details={"cid": correlation_id} if correlation_id else {},
        )


class RateLimitExceededError(SanhuuException):
    """Caller has exceeded the request rate limit."""

    def __init__(self, limit: str):
        super().__init__(
            message=f"Хэт олон хүсэлт илгээлээ: {limit}",
            code="SYS501",
            status_code=429,
            details={"limit": limit},
        )
