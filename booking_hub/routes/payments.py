"""
Payment routes — PayPal checkout.

Provides:
- POST /payments/create-order  – create a PayPal order for the booking total
- POST /payments/capture-order – capture the order and store the paid booking
"""
import logging

from fastapi import APIRouter, HTTPException

from booking_hub.container import get_payment_service
from booking_hub.core.exceptions import (
    ConfigStoreError,
    ExternalAPIError,
    PaymentError,
    ValidationError,
)
from booking_hub.schemas.bookings import (
    BookingCreatedResponse,
    CaptureOrderRequest,
    CreateOrderRequest,
    CreateOrderResponse,
)
from booking_hub.services.payment_service import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])


def _get_service() -> PaymentService:
    return get_payment_service()


@router.post("/create-order", response_model=CreateOrderResponse)
async def create_order(request: CreateOrderRequest) -> CreateOrderResponse:
    try:
        order = await _get_service().create_order(request.amount, request.currency)
    except ExternalAPIError as exc:
        logger.error("PayPal create order failed: %s", exc)
        raise HTTPException(status_code=502, detail="Failed to create PayPal order") from exc

    return CreateOrderResponse(id=order["id"], status=order.get("status", "CREATED"))


@router.post("/capture-order", response_model=BookingCreatedResponse, status_code=201)
async def capture_order(request: CaptureOrderRequest) -> BookingCreatedResponse:
    try:
        booking = await _get_service().capture_and_book(request.order_id, request.booking)
    except PaymentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ExternalAPIError as exc:
        logger.error("PayPal capture failed order=%s: %s", request.order_id, exc)
        raise HTTPException(status_code=502, detail="Failed to capture PayPal payment") from exc
    except ConfigStoreError as exc:
        # captured but not stored; order id is in the log for reconciliation
        logger.error("paid booking not stored order=%s: %s", request.order_id, exc)
        raise HTTPException(status_code=503, detail="Payment captured but booking could not be saved") from exc

    return BookingCreatedResponse(
        message="Payment captured and booking confirmed",
        booking_reference=booking.booking_reference,
        booking=booking,
    )
