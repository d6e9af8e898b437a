"""Affiliate link construction."""

# Partner tag appended to every generated link
AFFILIATE_TAG = "jaibalayya03-21"


def build_affiliate_link(asin: str, domain: str, tag: str = AFFILIATE_TAG) -> str:
    """
    Build an Amazon affiliate product link.

    Args:
        asin: Product ASIN.
        domain: Marketplace host, e.g. ``amazon.co.uk``.
        tag: Affiliate tag.

    Returns:
        ``https://www.<domain>/dp/<asin>?tag=<tag>``
    """
    return f"https://www.{domain}/dp/{asin}?tag={tag}"
