"""
Catalog service — active cars from the store, filtered for one tenant.
"""
import logging
from typing import List, Optional

from booking_hub.db.car_store import CarStore
from booking_hub.schemas.cars import CarCatalogEntry, CarType
from booking_hub.schemas.domains import TenantResolution
from booking_hub.services.domain_service import DomainService


class CatalogService:
    def __init__(self, car_store: CarStore) -> None:
        self._car_store = car_store
        self._logger = logging.getLogger("catalog_service")

    async def get_catalog(
        self, resolution: TenantResolution, car_type: Optional[CarType] = None
    ) -> List[CarCatalogEntry]:
        """
        Effective catalog for ``resolution``.

        The store is not queried for an unavailable tenant. Store errors
        propagate as ConfigStoreError.
        """
        if not resolution.is_available:
            return []

        cars = await self._car_store.list_cars(car_type=car_type, active_only=True)
        effective = DomainService.effective_catalog(cars, resolution)
        self._logger.info(
            "catalog tenant=%s status=%s car_type=%s raw=%d effective=%d",
            resolution.tenant_key, resolution.status.value,
            car_type.value if car_type else None, len(cars), len(effective),
        )
        return effective
