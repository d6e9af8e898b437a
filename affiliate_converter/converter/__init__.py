"""
Conversion module.

Turns Amazon product URLs into affiliate links.
"""

from affiliate_converter.converter.affiliate_converter import (
    AffiliateConverter,
    convert_to_affiliate_link,
)
from affiliate_converter.converter.asin_extractor import extract_asin, is_valid_asin
from affiliate_converter.converter.domains import (
    DEFAULT_DOMAIN,
    SUPPORTED_DOMAINS,
    get_amazon_domain,
    is_amazon_url,
)
from affiliate_converter.converter.link_builder import AFFILIATE_TAG, build_affiliate_link
from affiliate_converter.converter.models import (
    ConversionError,
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
)

__all__ = [
    "AFFILIATE_TAG",
    "DEFAULT_DOMAIN",
    "SUPPORTED_DOMAINS",
    "AffiliateConverter",
    "ConversionError",
    "ConversionFailure",
    "ConversionResult",
    "ConversionSuccess",
    "build_affiliate_link",
    "convert_to_affiliate_link",
    "extract_asin",
    "get_amazon_domain",
    "is_amazon_url",
    "is_valid_asin",
]
