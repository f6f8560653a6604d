"""
Domain service — tenant resolution and tenant catalog overrides.

Resolution runs once per request:
1. pick the tenant key (override > embedding page's referrer > Host)
2. short-circuit to the bypass tenant when allowed
3. look the key up in the domains table, retrying store errors
4. gate on existence and is_active; anything else is UNAVAILABLE

UNAVAILABLE is terminal: there is no default tenant, and a failing
store is treated like a missing row. The referrer is only a convenience
default for embedded widgets; it is never used for access control.
"""
import asyncio
import logging
from typing import List, Optional

from booking_hub.core.exceptions import ConfigStoreError
from booking_hub.db.domain_store import DomainStore
from booking_hub.schemas.cars import CarCatalogEntry, CarType
from booking_hub.schemas.domains import (
    ResolutionStatus,
    TenantConfig,
    TenantResolution,
)
from booking_hub.utils.hostname import normalize_hostname

logger = logging.getLogger(__name__)

BYPASS_TENANT_ID = "bypass"


def determine_tenant_key(
    host: Optional[str],
    override: Optional[str] = None,
    referrer: Optional[str] = None,
    embedded: bool = False,
) -> Optional[str]:
    """
    Pick and normalize the hostname that identifies the tenant.

    An override or referrer that does not parse as a hostname is skipped
    and the next candidate is used.
    """
    if override:
        key = normalize_hostname(override)
        if key:
            return key
        logger.info("ignoring unparseable domain override=%r", override)

    if embedded and referrer:
        key = normalize_hostname(referrer)
        if key:
            return key
        logger.info("ignoring unparseable referrer=%r", referrer)

    return normalize_hostname(host)


def apply_tenant_overrides(
    cars: List[CarCatalogEntry], config: TenantConfig
) -> List[CarCatalogEntry]:
    """
    Effective catalog for one tenant.

    Inactive cars are dropped. A car with an override tuple is hidden when
    is_visible is false, otherwise its price is replaced by a set, non-zero
    override price (price_per_day too for rentals). Cars without a tuple
    are shown at their base price. An inactive tenant gets nothing.
    """
    if not config.is_active:
        return []

    overrides = {override.car_id: override for override in config.cars}
    effective: List[CarCatalogEntry] = []

    for car in cars:
        if not car.is_active:
            continue

        override = overrides.get(car.id)
        if override is None:
            effective.append(car)
            continue

        if not override.is_visible:
            continue

        if override.price:
            update = {"price": override.price}
            if car.car_type == CarType.RENTAL:
                update["price_per_day"] = override.price
            car = car.model_copy(update=update)
        effective.append(car)

    return effective


class DomainService:
    def __init__(
        self,
        store: DomainStore,
        max_attempts: int = 3,
        backoff_seconds: float = 0.25,
        bypass_enabled: bool = False,
    ) -> None:
        self._store = store
        self._max_attempts = max(1, max_attempts)
        self._backoff_seconds = backoff_seconds
        self._bypass_enabled = bypass_enabled

    async def _lookup(self, tenant_key: str) -> Optional[TenantConfig]:
        for attempt in range(self._max_attempts):
            try:
                return await self._store.get_by_domain_name(tenant_key)
            except ConfigStoreError as e:
                if attempt < self._max_attempts - 1:
                    # Exponential backoff: base, 2x base, 4x base...
                    wait_time = self._backoff_seconds * (2 ** attempt)
                    logger.warning(
                        f"domain lookup failed on attempt {attempt + 1}/{self._max_attempts}, "
                        f"retrying in {wait_time}s: {str(e)[:200]}"
                    )
                    await asyncio.sleep(wait_time)
                    continue
                raise

    async def resolve(
        self,
        host: Optional[str],
        override: Optional[str] = None,
        referrer: Optional[str] = None,
        embedded: bool = False,
        allow_all: bool = False,
    ) -> TenantResolution:
        tenant_key = determine_tenant_key(host, override=override, referrer=referrer, embedded=embedded)

        if allow_all:
            if self._bypass_enabled:
                logger.warning("TENANT BYPASS: allow_all accepted for key=%s, tenant isolation skipped", tenant_key)
                return TenantResolution(
                    status=ResolutionStatus.BYPASS,
                    tenant_key=tenant_key,
                    config=TenantConfig(
                        id=BYPASS_TENANT_ID,
                        domain_name=tenant_key or "*",
                        cars=[],
                        is_active=True,
                    ),
                )
            logger.warning("allow_all ignored for key=%s: TENANT_BYPASS_ENABLED is off", tenant_key)

        if not tenant_key:
            logger.info("no usable tenant key in request, domain unavailable")
            return TenantResolution(status=ResolutionStatus.UNAVAILABLE)

        try:
            config = await self._lookup(tenant_key)
        except ConfigStoreError as e:
            logger.error("domain lookup failed for key=%s, failing closed: %s", tenant_key, e)
            return TenantResolution(status=ResolutionStatus.UNAVAILABLE, tenant_key=tenant_key)

        if config is None:
            logger.info("no domain config for key=%s", tenant_key)
            return TenantResolution(status=ResolutionStatus.UNAVAILABLE, tenant_key=tenant_key)

        if not config.is_active:
            logger.info("domain config inactive for key=%s", tenant_key)
            return TenantResolution(status=ResolutionStatus.UNAVAILABLE, tenant_key=tenant_key)

        return TenantResolution(status=ResolutionStatus.RESOLVED, tenant_key=tenant_key, config=config)

    @staticmethod
    def effective_catalog(
        cars: List[CarCatalogEntry], resolution: TenantResolution
    ) -> List[CarCatalogEntry]:
        """Catalog as seen by the resolved tenant; empty when unavailable."""
        if resolution.status == ResolutionStatus.UNAVAILABLE or resolution.config is None:
            return []
        if resolution.status == ResolutionStatus.BYPASS:
            return [car for car in cars if car.is_active]
        return apply_tenant_overrides(cars, resolution.config)
