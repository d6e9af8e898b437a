"""
Amazon marketplace detection.

Decides whether a URL belongs to a known Amazon storefront or short-link
host, and which regional host the affiliate link should point at.
"""

import re
from typing import List

# Regional storefronts and short-link hosts
SUPPORTED_DOMAINS: List[str] = [
    "amazon.com",
    "amazon.co.uk",
    "amazon.de",
    "amazon.fr",
    "amazon.it",
    "amazon.es",
    "amazon.ca",
    "amazon.com.au",
    "amazon.in",
    "amazon.co.jp",
    "amazon.com.br",
    "amazon.com.mx",
    "amzn.to",
    "amzn.com",
]

DEFAULT_DOMAIN = "amazon.com"

# amazon.co.uk, amazon.com.au, ...
MARKETPLACE_HOST_PATTERN = re.compile(r"amazon\.[\w.]+", re.IGNORECASE | re.ASCII)
# amzn.to, amzn.com
SHORTENER_HOST_PATTERN = re.compile(r"amzn\.\w+", re.IGNORECASE | re.ASCII)


def is_amazon_url(url: str) -> bool:
    """
    Check whether a URL contains a known Amazon host.

    This is a plain substring test, not host parsing: an Amazon host that
    only appears in the path or query of another site's URL still counts.

    Args:
        url: URL to check (already prefixed with a protocol).

    Returns:
        True if any supported domain occurs in the URL.
    """
    return any(domain in url for domain in SUPPORTED_DOMAINS)


def get_amazon_domain(url: str, default: str = DEFAULT_DOMAIN) -> str:
    """
    Get the marketplace host to use for the affiliate link.

    Args:
        url: Amazon URL.
        default: Host returned when nothing matches.

    Returns:
        The first ``amazon.<suffix>`` match, else the first ``amzn.<suffix>``
        match, else ``default``.

    Examples:
        >>> get_amazon_domain("https://www.amazon.co.uk/dp/B07PGL2ZSL")
        'amazon.co.uk'
        >>> get_amazon_domain("https://amzn.to/B07PGL2ZSL")
        'amzn.to'
    """
    match = MARKETPLACE_HOST_PATTERN.search(url) or SHORTENER_HOST_PATTERN.search(url)
    return match.group(0) if match else default
