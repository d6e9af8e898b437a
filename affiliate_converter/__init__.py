"""
Amazon affiliate link converter.

Rewrites Amazon product URLs into affiliate links for the matching regional
marketplace.
"""

from affiliate_converter.converter import (
    AFFILIATE_TAG,
    AffiliateConverter,
    ConversionError,
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    convert_to_affiliate_link,
)
from affiliate_converter.utils.clipboard import copy_to_clipboard

__version__ = "1.0.0"

__all__ = [
    "AFFILIATE_TAG",
    "AffiliateConverter",
    "ConversionError",
    "ConversionFailure",
    "ConversionResult",
    "ConversionSuccess",
    "convert_to_affiliate_link",
    "copy_to_clipboard",
]
