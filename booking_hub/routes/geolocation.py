"""
Geolocation routes — session defaults derived from the caller's IP.

Provides:
- GET /geolocation – location, currency symbol and licence rule
"""
from fastapi import APIRouter, Request

from booking_hub.container import get_geolocation_service
from booking_hub.core.tenant import client_ip
from booking_hub.schemas.geolocation import GeolocationResponse
from booking_hub.services.geolocation_service import GeolocationService

router = APIRouter(prefix="/geolocation", tags=["geolocation"])


def _get_service() -> GeolocationService:
    return get_geolocation_service()


@router.get("", response_model=GeolocationResponse)
async def get_geolocation(request: Request) -> GeolocationResponse:
    """Never fails: falls back to a US/USD default when every provider is down."""
    return await _get_service().session_defaults(client_ip(request))
