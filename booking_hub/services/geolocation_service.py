"""
Geolocation service — provider fallback chain with a fixed default.

Tries each provider of the GeolocationClient in order and returns the
first success. A provider failure of any kind is logged and the next
provider is tried; when all fail the US/USD default is returned.
``resolve`` never raises.
"""
import ipaddress
import logging
from typing import List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from booking_hub.clients.geolocation_client import GeoProvider
from booking_hub.core.exceptions import GeolocationProviderError
from booking_hub.schemas.geolocation import GeoLocationResult, GeolocationResponse
from booking_hub.services.currency_service import symbol_for
from booking_hub.services.license_service import get_license_format

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = GeoLocationResult(
    ip="unknown",
    country_code="US",
    country_name="United States",
    city="Unknown",
    region="Unknown",
    timezone="America/New_York",
    currency="USD",
)


def public_ip_or_none(ip: Optional[str]) -> Optional[str]:
    """
    Keep ``ip`` only when it is a globally routable address.

    Loopback and private addresses cannot be geolocated; returning None
    makes providers look up the caller of the outbound request instead.
    """
    if not ip:
        return None
    try:
        address = ipaddress.ip_address(ip.strip())
    except ValueError:
        return None
    return str(address) if address.is_global else None


class GeolocationService:
    def __init__(self, providers: List[Tuple[str, GeoProvider]]) -> None:
        self._providers = providers

    async def resolve(self, ip: Optional[str] = None) -> GeoLocationResult:
        lookup_ip = public_ip_or_none(ip)

        for name, provider in self._providers:
            try:
                result = await provider(lookup_ip)
            except (GeolocationProviderError, PydanticValidationError) as e:
                logger.warning("geolocation provider %s failed: %s", name, e)
                continue

            logger.info(
                "geolocation via %s: %s, %s (%s) -> %s",
                name, result.city, result.country_name, result.country_code, result.currency,
            )
            return result

        logger.warning("all geolocation providers failed, using default (USD)")
        return DEFAULT_LOCATION.model_copy()

    async def session_defaults(self, ip: Optional[str] = None) -> GeolocationResponse:
        """Location plus the currency symbol and licence rule derived from it."""
        location = await self.resolve(ip)
        return GeolocationResponse(
            location=location,
            currency_symbol=symbol_for(location.currency),
            license_format=get_license_format(location.country_code),
        )
