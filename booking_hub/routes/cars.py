"""
Car routes — tenant-scoped vehicle catalog.

Provides:
- GET /cars – effective catalog for the resolved tenant (optional car_type)
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from booking_hub.container import get_catalog_service
from booking_hub.core.exceptions import ConfigStoreError
from booking_hub.core.tenant import resolve_tenant
from booking_hub.schemas.cars import CarType, CatalogResponse
from booking_hub.schemas.domains import TenantResolution
from booking_hub.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"])

DOMAIN_UNAVAILABLE_DETAIL = "Booking is not available for this domain"


def _get_service() -> CatalogService:
    return get_catalog_service()


@router.get("", response_model=CatalogResponse)
async def list_cars(
    car_type: Optional[CarType] = Query(None),
    resolution: TenantResolution = Depends(resolve_tenant),
) -> CatalogResponse:
    if not resolution.is_available:
        raise HTTPException(status_code=503, detail=DOMAIN_UNAVAILABLE_DETAIL)

    try:
        cars = await _get_service().get_catalog(resolution, car_type)
    except ConfigStoreError as exc:
        logger.error("car catalog read failed for key=%s: %s", resolution.tenant_key, exc)
        raise HTTPException(status_code=503, detail="Car catalog is temporarily unavailable") from exc

    return CatalogResponse(
        tenant_key=resolution.tenant_key,
        status=resolution.status.value,
        cars=cars,
        total=len(cars),
    )
