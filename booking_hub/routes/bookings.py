"""
Booking routes — create, fetch and cancel bookings.

Provides:
- POST  /bookings                     – create an unpaid (pay on arrival) booking
- GET   /bookings/{reference}         – fetch a booking
- PATCH /bookings/{reference}/cancel  – cancel within 24 hours of creation
"""
import logging

from fastapi import APIRouter, HTTPException

from booking_hub.container import get_booking_service
from booking_hub.core.exceptions import (
    BookingNotFoundError,
    CancellationNotAllowedError,
    ConfigStoreError,
    ValidationError,
)
from booking_hub.schemas.bookings import (
    Booking,
    BookingCancelledResponse,
    BookingCreate,
    BookingCreatedResponse,
)
from booking_hub.services.booking_service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


def _get_service() -> BookingService:
    return get_booking_service()


@router.post("", response_model=BookingCreatedResponse, status_code=201)
async def create_booking(payload: BookingCreate) -> BookingCreatedResponse:
    try:
        booking = await _get_service().create_booking(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ConfigStoreError as exc:
        logger.error("booking insert failed: %s", exc)
        raise HTTPException(status_code=503, detail="Failed to save booking") from exc

    return BookingCreatedResponse(
        message="Booking created successfully",
        booking_reference=booking.booking_reference,
        booking=booking,
    )


@router.get("/{reference}", response_model=Booking)
async def get_booking(reference: str) -> Booking:
    try:
        return await _get_service().get_booking(reference.upper())
    except BookingNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ConfigStoreError as exc:
        raise HTTPException(status_code=503, detail="Booking store is temporarily unavailable") from exc


@router.patch("/{reference}/cancel", response_model=BookingCancelledResponse)
async def cancel_booking(reference: str) -> BookingCancelledResponse:
    try:
        booking = await _get_service().cancel_booking(reference.upper())
    except BookingNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except CancellationNotAllowedError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ConfigStoreError as exc:
        raise HTTPException(status_code=503, detail="Failed to cancel booking") from exc

    return BookingCancelledResponse(message="Booking cancelled successfully", booking=booking)
