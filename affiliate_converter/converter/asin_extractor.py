"""
ASIN extraction from Amazon URLs.

Supports the common Amazon URL formats:
- https://www.amazon.com/dp/B08N5WRWNW
- https://www.amazon.com/gp/product/B08N5WRWNW
- https://amzn.to/B08N5WRWNW (short links with a full 10-character code)
- https://www.amazon.com/s?k=lamp&asin=B08N5WRWNW
"""

import logging
import re
from typing import List, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.ASCII

# Tried in order, first match wins. Structural patterns come before the
# catch-alls ("short_link" and "amazon_path").
ASIN_PATTERNS: List[Tuple[str, Pattern[str]]] = [
    # Standard product URLs
    ("dp", re.compile(r"/dp/([A-Z0-9]{10})", _FLAGS)),
    ("gp_product", re.compile(r"/gp/product/([A-Z0-9]{10})", _FLAGS)),
    ("product", re.compile(r"/product/([A-Z0-9]{10})", _FLAGS)),
    # Short URLs: bare 10-character segment
    ("short_link", re.compile(r"/([A-Z0-9]{10})(?:/|\?|$)", _FLAGS)),
    # ASIN query parameter
    ("asin_param", re.compile(r"[?&]asin=([A-Z0-9]{10})", _FLAGS)),
    # Anything else under an Amazon host
    ("amazon_path", re.compile(r"amazon\.[\w.]+/.*/([A-Z0-9]{10})", _FLAGS)),
]

ASIN_RE = re.compile(r"[A-Z0-9]{10}", _FLAGS)


def extract_asin(url: str) -> Optional[str]:
    """
    Extract the ASIN from an Amazon URL.

    Args:
        url: Amazon product URL.

    Returns:
        The ASIN exactly as it appears in the URL, or None if no pattern matched.

    Examples:
        >>> extract_asin("https://www.amazon.com/dp/B08N5WRWNW/ref=xyz")
        'B08N5WRWNW'
        >>> extract_asin("https://amzn.to/3xYzAbC") is None
        True
    """
    url = url.strip()

    for name, pattern in ASIN_PATTERNS:
        match = pattern.search(url)
        if match:
            logger.debug(f"ASIN {match.group(1)} matched by '{name}' pattern in {url}")
            return match.group(1)

    return None


def is_valid_asin(value: object) -> bool:
    """Check that a value is exactly 10 ASCII letters or digits."""
    return isinstance(value, str) and ASIN_RE.fullmatch(value) is not None
