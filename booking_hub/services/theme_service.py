"""
Theme service — tenant-aware theme resolution and the theme catalogue.

Resolution order, first success wins:
(a) the tenant's assigned theme
(b) the globally active theme
(c) the built-in default theme
Lookup errors and misses fall through, so resolution always returns a theme.
Callers must pass a finished TenantResolution; step (a) depends on it.
"""
import logging
from typing import Dict, List, Optional, Tuple

from booking_hub.core.constants.themes import BUILT_IN_THEMES, DEFAULT_THEME_ID
from booking_hub.core.exceptions import ConfigStoreError
from booking_hub.db.theme_store import ThemeStore
from booking_hub.schemas.domains import TenantResolution
from booking_hub.schemas.themes import ThemeDefinition, ThemeListResponse

logger = logging.getLogger(__name__)

SOURCE_TENANT = "tenant"
SOURCE_ACTIVE = "active"
SOURCE_DEFAULT = "default"

# CSS custom property -> ThemeDefinition field
_TOKEN_FIELDS: Dict[str, str] = {
    "--primary": "primary_color",
    "--primary-rgb": "primary_color_rgb",
    "--primary-dark": "primary_dark",
    "--primary-dark-rgb": "primary_dark_rgb",
    "--secondary": "secondary_color",
    "--secondary-rgb": "secondary_color_rgb",
    "--secondary-dark": "secondary_dark",
    "--secondary-dark-rgb": "secondary_dark_rgb",
    "--background-start": "background_start",
    "--background-middle": "background_middle",
    "--background-end": "background_end",
    "--text-primary": "text_primary",
    "--text-secondary": "text_secondary",
    "--text-muted": "text_muted",
    "--accent": "accent_color",
    "--accent-rgb": "accent_color_rgb",
    "--success": "success_color",
    "--success-rgb": "success_color_rgb",
    "--warning": "warning_color",
    "--warning-rgb": "warning_color_rgb",
    "--card-background": "card_background",
    "--card-border": "card_border",
    "--card-shadow": "card_shadow",
    "--button-gradient-direction": "button_gradient_direction",
    "--border-radius": "border_radius",
    "--font-family": "font_family",
}


def _format_number(value: float) -> str:
    return f"{value:g}"


def theme_tokens(theme: ThemeDefinition) -> Dict[str, str]:
    """Flat CSS custom-property map for the presentation layer to apply."""
    tokens = {prop: str(getattr(theme, field)) for prop, field in _TOKEN_FIELDS.items()}
    tokens["--glass-opacity"] = _format_number(theme.glass_opacity)
    tokens["--glass-blur"] = f"{_format_number(theme.glass_blur)}px"
    return tokens


def built_in_theme(theme_id: str) -> Optional[ThemeDefinition]:
    data = BUILT_IN_THEMES.get(theme_id)
    return ThemeDefinition(**data) if data else None


def default_theme() -> ThemeDefinition:
    return ThemeDefinition(**BUILT_IN_THEMES[DEFAULT_THEME_ID], is_active=True)


class ThemeService:
    def __init__(self, store: ThemeStore) -> None:
        self._store = store

    async def _find_theme(self, theme_id: str) -> Optional[ThemeDefinition]:
        """Stored theme, else built-in with that id, else None. Never raises."""
        try:
            theme = await self._store.get_theme(theme_id)
        except ConfigStoreError as e:
            logger.warning("theme lookup failed id=%s: %s", theme_id, e)
            theme = None
        return theme or built_in_theme(theme_id)

    async def _find_active_theme(self) -> Optional[ThemeDefinition]:
        try:
            return await self._store.get_active_theme()
        except ConfigStoreError as e:
            logger.warning("active theme lookup failed: %s", e)
            return None

    async def resolve(self, resolution: TenantResolution) -> Tuple[ThemeDefinition, str]:
        """Theme for the tenant and which step produced it."""
        if resolution.theme_id:
            theme = await self._find_theme(resolution.theme_id)
            if theme is not None:
                return theme, SOURCE_TENANT
            logger.info("tenant theme %s not found for key=%s", resolution.theme_id, resolution.tenant_key)

        theme = await self._find_active_theme()
        if theme is not None:
            return theme, SOURCE_ACTIVE

        return default_theme(), SOURCE_DEFAULT

    async def get_theme(self, theme_id: str) -> ThemeDefinition:
        """Theme by id; the default theme when the id is unknown."""
        return await self._find_theme(theme_id) or default_theme()

    async def get_active_theme(self) -> ThemeDefinition:
        return await self._find_active_theme() or default_theme()

    async def list_themes(self) -> ThemeListResponse:
        """Stored themes plus built-ins that have no stored row."""
        try:
            stored = await self._store.list_themes()
        except ConfigStoreError as e:
            logger.warning("theme list failed, serving built-ins only: %s", e)
            stored = []

        themes: List[ThemeDefinition] = list(stored)
        stored_ids = {theme.id for theme in stored}
        themes.extend(
            ThemeDefinition(**data)
            for theme_id, data in BUILT_IN_THEMES.items()
            if theme_id not in stored_ids
        )

        active = next((theme for theme in stored if theme.is_active), None)
        active_id = active.id if active else DEFAULT_THEME_ID
        themes = [theme.model_copy(update={"is_active": theme.id == active_id}) for theme in themes]
        return ThemeListResponse(themes=themes, active_theme_id=active_id)

    async def activate_theme(self, theme_id: str) -> bool:
        """
        Make ``theme_id`` the single global active theme.

        A built-in theme without a stored row is stored first. Returns False
        for unknown ids. Store errors propagate.
        """
        if await self._store.get_theme(theme_id) is None:
            seed = built_in_theme(theme_id)
            if seed is None:
                return False
            await self._store.insert_theme(seed)
        return await self._store.activate_theme(theme_id)
