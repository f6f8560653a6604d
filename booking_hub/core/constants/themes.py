"""
Theme constants — built-in themes and the default theme id.

The default theme is the last step of theme resolution, so it must
always be a complete token set.
"""

DEFAULT_THEME_ID = "teal-ocean"

TEAL_OCEAN = {
    "id": "teal-ocean",
    "name": "Teal Ocean",
    "description": "Calm teal gradients with blue highlights",
    "primary_color": "#0d9488",
    "primary_color_rgb": "13, 148, 136",
    "primary_dark": "#0f766e",
    "primary_dark_rgb": "15, 118, 110",
    "secondary_color": "#3b82f6",
    "secondary_color_rgb": "59, 130, 246",
    "secondary_dark": "#2563eb",
    "secondary_dark_rgb": "37, 99, 235",
    "background_start": "#14b8a6",
    "background_middle": "#0d9488",
    "background_end": "#0f766e",
    "text_primary": "#0f172a",
    "text_secondary": "#475569",
    "text_muted": "#94a3b8",
    "accent_color": "#8b5cf6",
    "accent_color_rgb": "139, 92, 246",
    "success_color": "#10b981",
    "success_color_rgb": "16, 185, 129",
    "warning_color": "#f59e0b",
    "warning_color_rgb": "245, 158, 11",
    "card_background": "rgba(255, 255, 255, 0.95)",
    "card_border": "rgba(255, 255, 255, 0.7)",
    "card_shadow": "0 25px 50px -12px rgba(0, 0, 0, 0.15)",
    "button_gradient_direction": "135deg",
    "glass_opacity": 0.95,
    "glass_blur": 24,
    "border_radius": "1rem",
    "font_family": "'Inter', 'Segoe UI', system-ui, -apple-system, sans-serif",
}

MIDNIGHT_INDIGO = {
    **TEAL_OCEAN,
    "id": "midnight-indigo",
    "name": "Midnight Indigo",
    "description": "Deep indigo with violet accents",
    "primary_color": "#4f46e5",
    "primary_color_rgb": "79, 70, 229",
    "primary_dark": "#4338ca",
    "primary_dark_rgb": "67, 56, 202",
    "background_start": "#312e81",
    "background_middle": "#3730a3",
    "background_end": "#1e1b4b",
    "accent_color": "#a855f7",
    "accent_color_rgb": "168, 85, 247",
}

SUNSET_AMBER = {
    **TEAL_OCEAN,
    "id": "sunset-amber",
    "name": "Sunset Amber",
    "description": "Warm amber and rose tones",
    "primary_color": "#d97706",
    "primary_color_rgb": "217, 119, 6",
    "primary_dark": "#b45309",
    "primary_dark_rgb": "180, 83, 9",
    "secondary_color": "#e11d48",
    "secondary_color_rgb": "225, 29, 72",
    "secondary_dark": "#be123c",
    "secondary_dark_rgb": "190, 18, 60",
    "background_start": "#f59e0b",
    "background_middle": "#d97706",
    "background_end": "#b45309",
    "border_radius": "0.75rem",
}

BUILT_IN_THEMES: dict[str, dict] = {
    theme["id"]: theme for theme in (TEAL_OCEAN, MIDNIGHT_INDIGO, SUNSET_AMBER)
}
