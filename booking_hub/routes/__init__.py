"""
Route aggregator — mounts all routers under /api/v1 prefix.

Health is exported separately for main.py to mount at root.
"""
from fastapi import APIRouter

from booking_hub.routes.domains import router as domains_router
from booking_hub.routes.cars import router as cars_router
from booking_hub.routes.themes import router as themes_router
from booking_hub.routes.currency import router as currency_router
from booking_hub.routes.geolocation import router as geolocation_router
from booking_hub.routes.license import router as license_router
from booking_hub.routes.bookings import router as bookings_router
from booking_hub.routes.payments import router as payments_router
from booking_hub.routes.health import router as health_router

v1_router = APIRouter(prefix="/api/v1")

v1_router.include_router(domains_router)
v1_router.include_router(cars_router)
v1_router.include_router(themes_router)
v1_router.include_router(currency_router)
v1_router.include_router(geolocation_router)
v1_router.include_router(license_router)
v1_router.include_router(bookings_router)
v1_router.include_router(payments_router)

__all__ = ["v1_router", "health_router"]
