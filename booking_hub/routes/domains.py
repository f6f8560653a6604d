"""
Domain routes — tenant resolution for the calling site.

Provides:
- GET /domains/resolve – which tenant this request belongs to
"""
from fastapi import APIRouter, Depends

from booking_hub.core.tenant import resolve_tenant
from booking_hub.schemas.domains import TenantResolution

router = APIRouter(prefix="/domains", tags=["domains"])


@router.get("/resolve", response_model=TenantResolution)
async def resolve_domain(resolution: TenantResolution = Depends(resolve_tenant)) -> TenantResolution:
    """Resolution result; status is ``unavailable`` for unknown or inactive domains."""
    return resolution
