"""
Theme schemas — theme definitions and resolved theme responses.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel


class ThemeDefinition(BaseModel):
    """Row of the themes table, or one of the built-in themes."""
    id: str
    name: str
    description: str = ""
    is_active: bool = False

    # Primary colors
    primary_color: str = "#0d9488"
    primary_color_rgb: str = "13, 148, 136"
    primary_dark: str = "#0f766e"
    primary_dark_rgb: str = "15, 118, 110"
    # Secondary colors
    secondary_color: str = "#3b82f6"
    secondary_color_rgb: str = "59, 130, 246"
    secondary_dark: str = "#2563eb"
    secondary_dark_rgb: str = "37, 99, 235"
    # Background colors
    background_start: str = "#14b8a6"
    background_middle: str = "#0d9488"
    background_end: str = "#0f766e"
    # Text colors
    text_primary: str = "#0f172a"
    text_secondary: str = "#475569"
    text_muted: str = "#94a3b8"
    # Accent colors
    accent_color: str = "#8b5cf6"
    accent_color_rgb: str = "139, 92, 246"
    success_color: str = "#10b981"
    success_color_rgb: str = "16, 185, 129"
    warning_color: str = "#f59e0b"
    warning_color_rgb: str = "245, 158, 11"
    # Card styles
    card_background: str = "rgba(255, 255, 255, 0.95)"
    card_border: str = "rgba(255, 255, 255, 0.7)"
    card_shadow: str = "0 25px 50px -12px rgba(0, 0, 0, 0.15)"
    # Layout
    button_gradient_direction: str = "135deg"
    glass_opacity: float = 0.95
    glass_blur: float = 24
    border_radius: str = "1rem"
    font_family: str = "'Inter', 'Segoe UI', system-ui, -apple-system, sans-serif"

    preview_image: Optional[str] = None


class ResolvedThemeResponse(BaseModel):
    """Theme chosen for a tenant plus the CSS tokens to apply."""
    source: str
    tenant_key: Optional[str] = None
    theme: ThemeDefinition
    tokens: Dict[str, str]


class ThemeListResponse(BaseModel):
    themes: List[ThemeDefinition]
    active_theme_id: str
