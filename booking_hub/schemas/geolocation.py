"""
Geolocation schemas — IP lookup result and the session defaults derived from it.
"""
from typing import Optional

from pydantic import BaseModel

from booking_hub.schemas.licensing import LicenseFormatRule


class GeoLocationResult(BaseModel):
    ip: str
    country_code: str
    country_name: str
    city: str
    region: str
    timezone: str
    currency: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class GeolocationResponse(BaseModel):
    """What the booking wizard needs once per session."""
    location: GeoLocationResult
    currency_symbol: str
    license_format: LicenseFormatRule
