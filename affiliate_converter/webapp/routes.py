"""
FastAPI routes for the affiliate converter web API.

Handles:
- URL conversion (form and JSON bodies)
- Building a link from a known ASIN and marketplace
- Listing supported marketplaces
"""

import logging
from functools import lru_cache
from typing import Any, Dict

from fastapi import APIRouter, Depends, Form

from affiliate_converter.converter import (
    DEFAULT_DOMAIN,
    SUPPORTED_DOMAINS,
    AffiliateConverter,
    build_affiliate_link,
    is_valid_asin,
)
from affiliate_converter.utils.config_loader import (
    AppConfig,
    get_affiliate_tag,
    load_config,
    load_env,
)
from affiliate_converter.webapp.exceptions import InvalidASINError, UnsupportedDomainError
from affiliate_converter.webapp.schemas import (
    BuildLinkResponse,
    ConvertRequest,
    DomainsResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Dependency Injection
# ============================================================================

@lru_cache()
def get_app_config() -> AppConfig:
    """
    Get application config (cached).

    Clear cache with get_app_config.cache_clear() if config changes.
    """
    load_env()
    return load_config()


@lru_cache()
def get_converter() -> AffiliateConverter:
    """Get the process-wide converter built from config (cached)."""
    config = get_app_config()
    return AffiliateConverter(tag=get_affiliate_tag(config))


# ============================================================================
# API Routes - Conversion
# ============================================================================

@router.post("/api/convert")
async def api_convert_url(
    url: str = Form(""),
    converter: AffiliateConverter = Depends(get_converter),
) -> Dict[str, Any]:
    """
    Convert an Amazon URL submitted as a form field.

    Returns:
        JSON with the conversion result. Failures are reported in the body
        with ``success: false``, not as HTTP errors.
    """
    result = converter.convert(url)
    return result.to_dict()


@router.post("/api/convert/json")
async def api_convert_json(
    request: ConvertRequest,
    converter: AffiliateConverter = Depends(get_converter),
) -> Dict[str, Any]:
    """Convert an Amazon URL submitted as a JSON body."""
    result = converter.convert(request.url)
    return result.to_dict()


@router.get("/api/build-link", response_model=BuildLinkResponse)
async def api_build_link(
    asin: str,
    domain: str = DEFAULT_DOMAIN,
    converter: AffiliateConverter = Depends(get_converter),
) -> BuildLinkResponse:
    """
    Build an affiliate link from an ASIN and marketplace host.

    Raises:
        InvalidASINError: If ``asin`` is not 10 letters or digits.
        UnsupportedDomainError: If ``domain`` is not a supported host.
    """
    asin = asin.strip()
    domain = domain.strip().lower()

    if not is_valid_asin(asin):
        raise InvalidASINError(asin)
    if domain not in SUPPORTED_DOMAINS:
        raise UnsupportedDomainError(domain)

    return BuildLinkResponse(
        asin=asin,
        domain=domain,
        affiliate_link=build_affiliate_link(asin, domain, converter.tag),
    )


@router.get("/api/domains", response_model=DomainsResponse)
async def api_list_domains(
    converter: AffiliateConverter = Depends(get_converter),
) -> DomainsResponse:
    """List supported marketplace hosts and the active affiliate tag."""
    return DomainsResponse(
        domains=list(SUPPORTED_DOMAINS),
        tag=converter.tag,
    )
