"""
Payment service — PayPal order creation and capture-to-booking.
"""
import logging
from typing import Any, Dict

from booking_hub.clients.paypal_client import PayPalClient, extract_capture_id
from booking_hub.core.constants.bookings import PAYPAL_COMPLETED_STATUS
from booking_hub.core.exceptions import PaymentError
from booking_hub.schemas.bookings import Booking, BookingCreate
from booking_hub.services.booking_service import BookingService

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, client: PayPalClient, bookings: BookingService) -> None:
        self._client = client
        self._bookings = bookings

    async def create_order(self, amount: float, currency: str) -> Dict[str, Any]:
        return await self._client.create_order(f"{amount:.2f}", currency.upper())

    async def capture_and_book(self, order_id: str, payload: BookingCreate) -> Booking:
        """
        Capture ``order_id`` and store the booking as paid.

        The booking is validated before anything is captured.

        Raises:
            ValidationError: rental booking whose licence fails validation.
            PaymentError: capture did not complete.
            ExternalAPIError: PayPal call failed.
        """
        self._bookings.validate(payload)

        capture = await self._client.capture_order(order_id)

        status = capture.get("status")
        if status != PAYPAL_COMPLETED_STATUS:
            logger.warning("PayPal order %s not completed: status=%s", order_id, status)
            raise PaymentError("Payment not completed")

        capture_id = extract_capture_id(capture)
        if capture_id is None:
            raise PaymentError("Payment completed without a capture id")

        return await self._bookings.create_booking(
            payload, paypal_order_id=order_id, paypal_capture_id=capture_id
        )
