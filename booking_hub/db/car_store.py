"""
Car store – cars table reads for the public catalog.
"""

import logging
from typing import List, Optional

from booking_hub.db.base_store import BaseStore
from booking_hub.schemas.cars import CarCatalogEntry, CarType

logger = logging.getLogger("car_store")

TABLE = "cars"


class CarStore(BaseStore):

    async def list_cars(
        self, car_type: Optional[CarType] = None, active_only: bool = True
    ) -> List[CarCatalogEntry]:
        """List cars, newest first, filtered by category and active flag."""
        filters = {}
        if car_type is not None:
            filters["car_type"] = car_type.value
        if active_only:
            filters["is_active"] = True

        rows = await self._select(TABLE, filters=filters, order_by="created_at")
        logger.info("cars listed car_type=%s active_only=%s count=%d",
                    car_type.value if car_type else None, active_only, len(rows))
        return [self._to_model(TABLE, CarCatalogEntry, row) for row in rows]
