"""
Theme routes — theme catalogue, activation and tenant-aware resolution.

Provides:
- GET /themes                      – all themes with the active flag
- GET /themes/active               – global active theme
- GET /themes/resolve              – theme for the calling tenant, with CSS tokens
- GET /themes/{theme_id}           – one theme (default when unknown)
- PUT /themes/{theme_id}/activate  – make a theme the global active theme
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from booking_hub.container import get_theme_service
from booking_hub.core.exceptions import ConfigStoreError
from booking_hub.core.tenant import resolve_tenant
from booking_hub.schemas.domains import TenantResolution
from booking_hub.schemas.themes import ResolvedThemeResponse, ThemeDefinition, ThemeListResponse
from booking_hub.services.theme_service import ThemeService, theme_tokens

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/themes", tags=["themes"])


def _get_service() -> ThemeService:
    return get_theme_service()


@router.get("", response_model=ThemeListResponse)
async def list_themes() -> ThemeListResponse:
    return await _get_service().list_themes()


@router.get("/active", response_model=ThemeDefinition)
async def get_active_theme() -> ThemeDefinition:
    return await _get_service().get_active_theme()


@router.get("/resolve", response_model=ResolvedThemeResponse)
async def resolve_theme(
    resolution: TenantResolution = Depends(resolve_tenant),
) -> ResolvedThemeResponse:
    """Tenant theme, else the active theme, else the built-in default."""
    theme, source = await _get_service().resolve(resolution)
    return ResolvedThemeResponse(
        source=source,
        tenant_key=resolution.tenant_key,
        theme=theme,
        tokens=theme_tokens(theme),
    )


@router.get("/{theme_id}", response_model=ThemeDefinition)
async def get_theme(theme_id: str) -> ThemeDefinition:
    return await _get_service().get_theme(theme_id)


@router.put("/{theme_id}/activate")
async def activate_theme(theme_id: str):
    try:
        activated = await _get_service().activate_theme(theme_id)
    except ConfigStoreError as exc:
        logger.error("theme activation failed id=%s: %s", theme_id, exc)
        raise HTTPException(status_code=503, detail="Theme store is temporarily unavailable") from exc

    if not activated:
        raise HTTPException(status_code=404, detail=f"Theme {theme_id} not found")

    return {"success": True, "active_theme_id": theme_id}
