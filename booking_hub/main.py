import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from booking_hub.core.config import settings
from booking_hub.core.middleware import apply_cors
from booking_hub.routes import health_router, v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler.

    Clients and stores are built lazily by the container on first use,
    so startup only reports configuration.
    """
    logger.info("=== Rental Booking Hub Starting ===")

    if not settings.supabase_url or not settings.supabase_service_role_key:
        logger.warning("Supabase is not configured; domain, car, theme and booking routes will fail")
    if settings.tenant_bypass_enabled:
        logger.warning("TENANT BYPASS is enabled; allow_all=true skips tenant isolation")
    if not settings.resend_api_key:
        logger.info("RESEND_API_KEY not set, booking e-mails are disabled")

    logger.info("=== Rental Booking Hub Ready ===")

    yield

    logger.info("=== Rental Booking Hub Shutting Down ===")


app = FastAPI(title="Rental Booking Hub Backend", lifespan=lifespan)
logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

apply_cors(app)

app.include_router(health_router)
app.include_router(v1_router)
