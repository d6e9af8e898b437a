"""
Pydantic models for requests and responses of the web API.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    """Request model for JSON conversion endpoint."""

    url: Optional[Any] = Field(
        None,
        description="Amazon product URL to convert"
    )


class BuildLinkResponse(BaseModel):
    """Affiliate link built from an ASIN and domain."""

    asin: str
    domain: str
    affiliate_link: str


class DomainsResponse(BaseModel):
    """Supported marketplaces and the active affiliate tag."""

    domains: List[str] = Field(default_factory=list)
    tag: str
