"""
Base Supabase store with shared CRUD helpers.

All table stores inherit from this class to get standardised
insert / select / update primitives. PostgREST and transport failures
are re-raised as ConfigStoreError so callers decide whether to fail
closed or fall through.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from postgrest.exceptions import APIError
from pydantic import BaseModel, ValidationError as PydanticValidationError

from booking_hub.clients.supabase_client import SupabaseClient
from booking_hub.core.exceptions import ConfigStoreError

logger = logging.getLogger("base_store")

STORE_ERRORS = (APIError, httpx.HTTPError)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseStore:
    """Base class for all Supabase stores providing shared CRUD operations."""

    def __init__(self, supabase_client: SupabaseClient) -> None:
        self._supabase_client = supabase_client

    @property
    def _client(self):
        """Get the Supabase client instance."""
        return self._supabase_client.client

    def _to_model(self, table: str, model: Type[ModelT], row: Dict[str, Any]) -> ModelT:
        """Build ``model`` from a stored row; malformed rows raise ConfigStoreError."""
        try:
            return model(**row)
        except PydanticValidationError as e:
            logger.warning("malformed row table=%s id=%s errors=%d", table, row.get("id"), e.error_count())
            raise ConfigStoreError(f"Malformed row in {table}: {e}") from e

    async def _insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it as stored."""
        try:
            response = self._client.table(table).insert(row).execute()
        except STORE_ERRORS as e:
            logger.info("supabase error table=%s detail=%s", table, str(e))
            raise ConfigStoreError(f"Supabase insert into {table} failed: {e}") from e
        return (response.data or [row])[0]

    async def _select(
        self,
        table: str,
        columns: str = "*",
        filters: Dict[str, Any] | None = None,
        order_by: str | None = None,
    ) -> List[Dict[str, Any]]:
        """Select rows from a table with optional equality filters."""
        try:
            query = self._client.table(table).select(columns)
            if filters:
                for key, value in filters.items():
                    query = query.eq(key, value)
            if order_by:
                query = query.order(order_by, desc=True)
            response = query.execute()
            return response.data or []
        except STORE_ERRORS as e:
            logger.info("supabase error table=%s detail=%s", table, str(e))
            raise ConfigStoreError(f"Supabase select from {table} failed: {e}") from e

    async def _select_one(
        self, table: str, filters: Dict[str, Any], columns: str = "*"
    ) -> Optional[Dict[str, Any]]:
        """Select the first row matching the filters, or None."""
        try:
            query = self._client.table(table).select(columns)
            for key, value in filters.items():
                query = query.eq(key, value)
            response = query.limit(1).execute()
        except STORE_ERRORS as e:
            logger.info("supabase error table=%s detail=%s", table, str(e))
            raise ConfigStoreError(f"Supabase select from {table} failed: {e}") from e
        return response.data[0] if response.data else None

    async def _update(
        self, table: str, filters: Dict[str, Any], payload: Dict[str, Any]
    ) -> List[Dict[str, Any]]:
        """Update rows in a table matching the filters."""
        try:
            query = self._client.table(table).update(payload)
            for key, value in filters.items():
                query = query.eq(key, value)
            response = query.execute()
            return response.data or []
        except STORE_ERRORS as e:
            logger.info("supabase error table=%s detail=%s", table, str(e))
            raise ConfigStoreError(f"Supabase update {table} failed: {e}") from e
