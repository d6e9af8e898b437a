"""
Result types for affiliate link conversion.

A conversion either succeeds (ASIN found, link built) or fails with one of a
small, fixed set of causes. The two outcomes are separate dataclasses so a
result never carries fields from both.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union


class ConversionError(str, Enum):
    """
    Failure causes for a conversion.

    Values:
        INVALID_INPUT: Input missing, empty, or not a string.
        NOT_AMAZON_URL: Input does not contain a recognized Amazon host.
        ASIN_NOT_FOUND: Amazon host recognized but no ASIN could be extracted.
        UNEXPECTED_ERROR: Any other internal fault during processing.
    """
    INVALID_INPUT = "INVALID_INPUT"
    NOT_AMAZON_URL = "NOT_AMAZON_URL"
    ASIN_NOT_FOUND = "ASIN_NOT_FOUND"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


# Human-readable messages shown to the user
ERROR_MESSAGES = {
    ConversionError.INVALID_INPUT: "Please enter a valid URL",
    ConversionError.NOT_AMAZON_URL: "Please enter a valid Amazon product URL",
    ConversionError.ASIN_NOT_FOUND: (
        "Could not extract product ID from this Amazon URL. Please check the URL format."
    ),
    ConversionError.UNEXPECTED_ERROR: "An error occurred while processing the URL: ",
}


@dataclass(frozen=True)
class ConversionSuccess:
    """Successful conversion of an Amazon URL."""

    original_url: str
    asin: str
    affiliate_link: str
    success: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": True,
            "original_url": self.original_url,
            "asin": self.asin,
            "affiliate_link": self.affiliate_link,
        }


@dataclass(frozen=True)
class ConversionFailure:
    """Failed conversion with a user-facing message."""

    error: str
    code: ConversionError
    success: bool = field(default=False, init=False)

    @classmethod
    def from_code(cls, code: ConversionError, detail: str = "") -> "ConversionFailure":
        """Build a failure from its cause, appending ``detail`` to the message."""
        return cls(error=ERROR_MESSAGES[code] + detail, code=code)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": False,
            "error": self.error,
            "error_code": self.code.value,
        }


ConversionResult = Union[ConversionSuccess, ConversionFailure]
