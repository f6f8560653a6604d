"""
Theme store – themes table reads and global activation.
"""

import logging
from typing import List, Optional

from booking_hub.db.base_store import BaseStore
from booking_hub.schemas.themes import ThemeDefinition

logger = logging.getLogger("theme_store")

TABLE = "themes"


class ThemeStore(BaseStore):

    async def get_theme(self, theme_id: str) -> Optional[ThemeDefinition]:
        row = await self._select_one(TABLE, {"id": theme_id})
        return self._to_model(TABLE, ThemeDefinition, row) if row else None

    async def get_active_theme(self) -> Optional[ThemeDefinition]:
        row = await self._select_one(TABLE, {"is_active": True})
        return self._to_model(TABLE, ThemeDefinition, row) if row else None

    async def list_themes(self) -> List[ThemeDefinition]:
        rows = await self._select(TABLE)
        return [self._to_model(TABLE, ThemeDefinition, row) for row in rows]

    async def insert_theme(self, theme: ThemeDefinition) -> ThemeDefinition:
        stored = await self._insert(TABLE, theme.model_dump(mode="json"))
        logger.info("theme stored id=%s", theme.id)
        return self._to_model(TABLE, ThemeDefinition, stored)

    async def activate_theme(self, theme_id: str) -> bool:
        """
        Make ``theme_id`` the only active theme.

        Returns False when no stored row has that id; nothing is
        deactivated in that case.
        """
        if await self._select_one(TABLE, {"id": theme_id}, columns="id") is None:
            return False

        await self._update(TABLE, {"is_active": True}, {"is_active": False})
        await self._update(TABLE, {"id": theme_id}, {"is_active": True})
        logger.info("theme activated id=%s", theme_id)
        return True
