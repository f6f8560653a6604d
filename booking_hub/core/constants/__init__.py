"""
Centralized business constants for Rental Booking Hub.

Usage:
    from booking_hub.core.constants.currency import COUNTRY_TO_CURRENCY
    from booking_hub.core.constants.themes import DEFAULT_THEME_ID
    # or import everything:
    from booking_hub.core.constants import bookings, currency, licensing, themes
"""

from booking_hub.core.constants import bookings, currency, licensing, themes
from booking_hub.core.constants.currency import (
    BASE_CURRENCY,
    DEFAULT_CURRENCY,
    CURRENCIES,
    COUNTRY_TO_CURRENCY,
)
from booking_hub.core.constants.licensing import (
    LICENSE_LENGTHS,
    DEFAULT_LICENSE_LENGTH,
    LICENSE_REQUIRED_MESSAGE,
)
from booking_hub.core.constants.themes import (
    DEFAULT_THEME_ID,
    BUILT_IN_THEMES,
)
from booking_hub.core.constants.bookings import (
    BOOKING_REFERENCE_PREFIX,
    CANCELLATION_WINDOW_HOURS,
)

__all__ = [
    "bookings",
    "currency",
    "licensing",
    "themes",
    "BASE_CURRENCY",
    "DEFAULT_CURRENCY",
    "CURRENCIES",
    "COUNTRY_TO_CURRENCY",
    "LICENSE_LENGTHS",
    "DEFAULT_LICENSE_LENGTH",
    "LICENSE_REQUIRED_MESSAGE",
    "DEFAULT_THEME_ID",
    "BUILT_IN_THEMES",
    "BOOKING_REFERENCE_PREFIX",
    "CANCELLATION_WINDOW_HOURS",
]
