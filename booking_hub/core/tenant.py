"""
Tenant context — per-request tenant resolution dependency.

Every public catalog and theme route depends on ``resolve_tenant`` so the
tenant is resolved exactly once per request, before anything else runs.
"""
import logging
from typing import Optional

from fastapi import Query, Request

from booking_hub.container import get_domain_service
from booking_hub.schemas.domains import TenantResolution

logger = logging.getLogger(__name__)

IFRAME_FETCH_DEST = "iframe"


def is_embedded_request(request: Request, embedded_flag: bool = False) -> bool:
    """True when the page is rendered inside another site's iframe."""
    if embedded_flag:
        return True
    return request.headers.get("sec-fetch-dest", "").lower() == IFRAME_FETCH_DEST


def client_ip(request: Request) -> Optional[str]:
    """Caller IP: first X-Forwarded-For hop, else the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.client.host if request.client else None


async def resolve_tenant(
    request: Request,
    domain: Optional[str] = Query(None, description="Explicit tenant hostname override"),
    embedded: bool = Query(False, description="Page is embedded in a partner site"),
    allow_all: bool = Query(False, description="Staging-only tenant bypass"),
) -> TenantResolution:
    resolution = await get_domain_service().resolve(
        host=request.headers.get("host"),
        override=domain,
        referrer=request.headers.get("referer"),
        embedded=is_embedded_request(request, embedded),
        allow_all=allow_all,
    )
    logger.debug("tenant resolved key=%s status=%s", resolution.tenant_key, resolution.status.value)
    return resolution
