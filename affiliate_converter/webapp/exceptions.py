"""
Custom exceptions for the affiliate converter web API.

Provides a hierarchy of exceptions for clean error handling in routes.
Conversion failures are not exceptions; they are returned as results.
"""

from typing import Optional, Dict, Any


class AppException(Exception):
    """Base exception for application errors."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if status_code:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(AppException):
    """Raised when input validation fails."""

    status_code = 400
    error_code = "VALIDATION_ERROR"


class InvalidASINError(ValidationError):
    """Raised when a value is not a 10-character ASIN."""

    error_code = "INVALID_ASIN"

    def __init__(self, asin: str):
        super().__init__(
            "ASIN must be exactly 10 letters or digits",
            details={"asin": asin}
        )


class UnsupportedDomainError(ValidationError):
    """Raised when a marketplace host is not supported."""

    error_code = "UNSUPPORTED_DOMAIN"

    def __init__(self, domain: str):
        super().__init__(
            f"Unsupported Amazon domain: {domain}",
            details={"domain": domain}
        )
