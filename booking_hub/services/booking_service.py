"""
Booking service — create, fetch and cancel bookings.

Handles:
- Licence validation for rental bookings before anything is stored
- Unique BK-NNNNNN reference generation
- The 24-hour cancellation window
- Confirmation / cancellation e-mails (best effort)
"""
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from booking_hub.core.constants.bookings import (
    BOOKING_REFERENCE_DIGITS,
    BOOKING_REFERENCE_PREFIX,
    CANCELLATION_WINDOW_HOURS,
)
from booking_hub.core.exceptions import (
    BookingNotFoundError,
    CancellationNotAllowedError,
    ValidationError,
)
from booking_hub.db.booking_store import BookingStore
from booking_hub.schemas.bookings import Booking, BookingCreate
from booking_hub.services.license_service import validate_license
from booking_hub.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

MAX_REFERENCE_ATTEMPTS = 5


def generate_reference() -> str:
    low = 10 ** (BOOKING_REFERENCE_DIGITS - 1)
    high = 10 ** BOOKING_REFERENCE_DIGITS - 1
    return f"{BOOKING_REFERENCE_PREFIX}{random.randint(low, high)}"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BookingService:
    def __init__(
        self,
        store: BookingStore,
        notifier: NotificationService,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._clock = clock

    async def _new_reference(self) -> str:
        for _ in range(MAX_REFERENCE_ATTEMPTS):
            reference = generate_reference()
            if not await self._store.reference_exists(reference):
                return reference
        raise ValidationError("Could not allocate a unique booking reference")

    def validate(self, payload: BookingCreate) -> None:
        """Raise ValidationError when a rental booking's licence is invalid."""
        if payload.booking_type == "rental":
            result = validate_license(payload.license_number, payload.license_country)
            if not result.is_valid:
                raise ValidationError(result.error_message)

    async def create_booking(
        self,
        payload: BookingCreate,
        paypal_order_id: Optional[str] = None,
        paypal_capture_id: Optional[str] = None,
    ) -> Booking:
        """
        Store a booking and send confirmations.

        A booking with a PayPal capture is stored paid and confirmed;
        otherwise it is unpaid and pending.

        Raises:
            ValidationError: rental booking whose licence fails validation.
        """
        self.validate(payload)

        paid = paypal_capture_id is not None
        booking = Booking(
            **payload.model_dump(),
            booking_reference=await self._new_reference(),
            status="confirmed" if paid else "pending",
            payment_status="paid" if paid else "unpaid",
            paypal_order_id=paypal_order_id,
            paypal_capture_id=paypal_capture_id,
            created_at=self._clock(),
        )

        stored = await self._store.insert_booking(booking)
        logger.info(
            "booking created reference=%s type=%s payment=%s",
            stored.booking_reference, stored.booking_type, stored.payment_status,
        )
        self._notifier.booking_confirmed(stored)
        return stored

    async def get_booking(self, reference: str) -> Booking:
        booking = await self._store.get_booking(reference)
        if booking is None:
            raise BookingNotFoundError(reference)
        return booking

    async def cancel_booking(self, reference: str) -> Booking:
        """
        Cancel within the window after creation.

        Raises:
            BookingNotFoundError: unknown reference.
            CancellationNotAllowedError: already cancelled, or window elapsed.
        """
        booking = await self.get_booking(reference)

        if booking.status == "cancelled":
            raise CancellationNotAllowedError("Booking is already cancelled")

        created_at = booking.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        if self._clock() - created_at > timedelta(hours=CANCELLATION_WINDOW_HOURS):
            raise CancellationNotAllowedError(
                f"Cancellation is only allowed within {CANCELLATION_WINDOW_HOURS} hours of booking creation."
            )

        updated = await self._store.update_booking(reference, {"status": "cancelled"})
        cancelled = updated or booking.model_copy(update={"status": "cancelled"})
        logger.info("booking cancelled reference=%s", reference)
        self._notifier.booking_cancelled(cancelled)
        return cancelled
