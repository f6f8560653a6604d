"""
Booking store – bookings table CRUD.
"""

import logging
from typing import Any, Dict, Optional

from booking_hub.db.base_store import BaseStore
from booking_hub.schemas.bookings import Booking

logger = logging.getLogger("booking_store")

TABLE = "bookings"


class BookingStore(BaseStore):

    async def insert_booking(self, booking: Booking) -> Booking:
        row = booking.model_dump(mode="json")
        stored = await self._insert(TABLE, row)
        logger.info("booking stored reference=%s", booking.booking_reference)
        return self._to_model(TABLE, Booking, stored)

    async def reference_exists(self, reference: str) -> bool:
        row = await self._select_one(TABLE, {"booking_reference": reference}, columns="booking_reference")
        return row is not None

    async def get_booking(self, reference: str) -> Optional[Booking]:
        row = await self._select_one(TABLE, {"booking_reference": reference})
        return self._to_model(TABLE, Booking, row) if row else None

    async def update_booking(self, reference: str, payload: Dict[str, Any]) -> Optional[Booking]:
        rows = await self._update(TABLE, {"booking_reference": reference}, payload)
        return self._to_model(TABLE, Booking, rows[0]) if rows else None
