"""
Affiliate link conversion.

Validates a user-supplied Amazon URL, extracts its ASIN and marketplace,
and builds the affiliate link. Every outcome is returned as a
ConversionResult; nothing is raised to the caller.
"""

import logging
from typing import Any, Optional

from affiliate_converter.converter.asin_extractor import extract_asin
from affiliate_converter.converter.domains import get_amazon_domain, is_amazon_url
from affiliate_converter.converter.link_builder import AFFILIATE_TAG, build_affiliate_link
from affiliate_converter.converter.models import (
    ConversionError,
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
)

logger = logging.getLogger(__name__)


def normalize_url(url: str) -> str:
    """Strip whitespace and add ``https://`` when no protocol is present."""
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


class AffiliateConverter:
    """
    Converts Amazon product URLs into affiliate links.

    The affiliate tag is fixed when the converter is created.
    """

    def __init__(self, tag: str = AFFILIATE_TAG):
        self._tag = tag

    @property
    def tag(self) -> str:
        return self._tag

    def convert(self, input_url: Any) -> ConversionResult:
        """
        Convert a URL to an affiliate link.

        Args:
            input_url: Raw user input. Anything that is not a non-empty
                string is rejected.

        Returns:
            ConversionSuccess with the original input, ASIN and affiliate
            link, or ConversionFailure describing why conversion failed.
        """
        try:
            if not input_url or not isinstance(input_url, str):
                logger.info(
                    "Rejected conversion request: empty or non-string input",
                    extra={"error_code": ConversionError.INVALID_INPUT.value},
                )
                return ConversionFailure.from_code(ConversionError.INVALID_INPUT)

            url = normalize_url(input_url)

            if not is_amazon_url(url):
                logger.info(
                    f"Rejected non-Amazon URL: {url}",
                    extra={"error_code": ConversionError.NOT_AMAZON_URL.value},
                )
                return ConversionFailure.from_code(ConversionError.NOT_AMAZON_URL)

            asin = extract_asin(url)
            if not asin:
                logger.info(
                    f"No ASIN found in URL: {url}",
                    extra={"error_code": ConversionError.ASIN_NOT_FOUND.value},
                )
                return ConversionFailure.from_code(ConversionError.ASIN_NOT_FOUND)

            domain = get_amazon_domain(url)
            affiliate_link = build_affiliate_link(asin, domain, self._tag)

            logger.info(
                f"Converted {url} -> {affiliate_link}",
                extra={"asin": asin, "domain": domain},
            )

            return ConversionSuccess(
                original_url=input_url,
                asin=asin,
                affiliate_link=affiliate_link,
            )

        except Exception as e:
            logger.exception(
                f"Unexpected error converting URL: {e}",
                extra={"error_code": ConversionError.UNEXPECTED_ERROR.value},
            )
            return ConversionFailure.from_code(ConversionError.UNEXPECTED_ERROR, str(e))


_default_converter = AffiliateConverter()


def convert_to_affiliate_link(input_url: Any, tag: Optional[str] = None) -> ConversionResult:
    """
    Convert a URL to an affiliate link.

    Args:
        input_url: Raw user input.
        tag: Affiliate tag override. Defaults to AFFILIATE_TAG.

    Returns:
        ConversionResult for the input.

    Examples:
        >>> convert_to_affiliate_link("https://amazon.co.uk/gp/product/B07PGL2ZSL").affiliate_link
        'https://www.amazon.co.uk/dp/B07PGL2ZSL?tag=jaibalayya03-21'
    """
    converter = _default_converter if tag is None else AffiliateConverter(tag)
    return converter.convert(input_url)
