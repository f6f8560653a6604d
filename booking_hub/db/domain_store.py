"""
Domain store – domains table (tenant configuration) reads.
"""

import logging
from typing import Optional

from booking_hub.core.exceptions import ConfigStoreError
from booking_hub.db.base_store import BaseStore, STORE_ERRORS
from booking_hub.schemas.domains import TenantConfig

logger = logging.getLogger("domain_store")

TABLE = "domains"


class DomainStore(BaseStore):
    """Lookup of tenant configuration by hostname."""

    async def get_by_domain_name(self, domain_name: str) -> Optional[TenantConfig]:
        """
        Case-insensitive exact match on domain_name.

        ``domain_name`` must already be a normalized hostname; hostnames
        carry no ILIKE wildcards so the pattern matches exactly.
        """
        try:
            response = (
                self._client.table(TABLE)
                .select("*")
                .ilike("domain_name", domain_name)
                .limit(1)
                .execute()
            )
        except STORE_ERRORS as e:
            logger.info("supabase error table=%s detail=%s", TABLE, str(e))
            raise ConfigStoreError(f"Supabase select from {TABLE} failed: {e}") from e

        if not response.data:
            return None
        return self._to_model(TABLE, TenantConfig, response.data[0])
