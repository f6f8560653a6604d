"""
Geolocation HTTP client — IP lookups against ip-api.com, ipapi.co and ipinfo.io.

Each provider method returns a GeoLocationResult or raises
GeolocationProviderError; network errors, timeouts, bad payloads and
explicit error fields all surface as that one exception.
"""
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

import httpx

from booking_hub.core.config import Settings
from booking_hub.core.constants.currency import COUNTRY_TO_CURRENCY, DEFAULT_CURRENCY
from booking_hub.core.exceptions import GeolocationProviderError
from booking_hub.schemas.geolocation import GeoLocationResult

logger = logging.getLogger("geolocation_client")

IP_API_FIELDS = "status,message,country,countryCode,region,city,timezone,lat,lon,query"

GeoProvider = Callable[[Optional[str]], Awaitable[GeoLocationResult]]


def currency_for_country(country_code: str) -> str:
    """Map a country code to its currency, USD when unmapped."""
    return COUNTRY_TO_CURRENCY.get((country_code or "").upper(), DEFAULT_CURRENCY)


class GeolocationClient:
    def __init__(self, settings: Settings) -> None:
        self._ip_api_url = settings.geo_ip_api_url.rstrip("/")
        self._ipapi_co_url = settings.geo_ipapi_co_url.rstrip("/")
        self._ipinfo_url = settings.geo_ipinfo_url.rstrip("/")
        self._timeout = settings.external_timeout_seconds

    @property
    def providers(self) -> List[Tuple[str, GeoProvider]]:
        """Providers in the order they should be tried."""
        return [
            ("ip-api.com", self.lookup_ip_api),
            ("ipapi.co", self.lookup_ipapi_co),
            ("ipinfo.io", self.lookup_ipinfo),
        ]

    async def _get_json(self, provider: str, url: str, params: Dict[str, str] | None = None) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            raise GeolocationProviderError(provider, "request timed out") from e
        except httpx.RequestError as e:
            raise GeolocationProviderError(provider, f"network error: {e}") from e

        if resp.status_code != 200:
            raise GeolocationProviderError(provider, f"HTTP {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as e:
            raise GeolocationProviderError(provider, "response is not JSON") from e

        if not isinstance(body, dict):
            raise GeolocationProviderError(provider, "unexpected payload shape")
        return body

    async def lookup_ip_api(self, ip: Optional[str] = None) -> GeoLocationResult:
        """Primary: ip-api.com (no key, 45 requests/minute)."""
        url = f"{self._ip_api_url}/{ip}" if ip else f"{self._ip_api_url}/"
        data = await self._get_json("ip-api.com", url, params={"fields": IP_API_FIELDS})

        if data.get("status") != "success":
            raise GeolocationProviderError("ip-api.com", data.get("message") or "status not success")

        country_code = data.get("countryCode")
        if not country_code:
            raise GeolocationProviderError("ip-api.com", "missing countryCode")

        return GeoLocationResult(
            ip=data.get("query") or ip or "unknown",
            country_code=country_code,
            country_name=data.get("country") or country_code,
            city=data.get("city") or "",
            region=data.get("region") or "",
            timezone=data.get("timezone") or "",
            currency=currency_for_country(country_code),
            latitude=data.get("lat"),
            longitude=data.get("lon"),
        )

    async def lookup_ipapi_co(self, ip: Optional[str] = None) -> GeoLocationResult:
        """Backup: ipapi.co (free tier, 1000/day). Reports its own currency."""
        url = f"{self._ipapi_co_url}/{ip}/json/" if ip else f"{self._ipapi_co_url}/json/"
        data = await self._get_json("ipapi.co", url)

        if data.get("error"):
            raise GeolocationProviderError("ipapi.co", data.get("reason") or "error in payload")

        country_code = data.get("country_code")
        if not country_code:
            raise GeolocationProviderError("ipapi.co", "missing country_code")

        return GeoLocationResult(
            ip=data.get("ip") or ip or "unknown",
            country_code=country_code,
            country_name=data.get("country_name") or country_code,
            city=data.get("city") or "",
            region=data.get("region") or "",
            timezone=data.get("timezone") or "",
            currency=data.get("currency") or currency_for_country(country_code),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
        )

    async def lookup_ipinfo(self, ip: Optional[str] = None) -> GeoLocationResult:
        """Tertiary: ipinfo.io (50k/month). Only returns the country code."""
        url = f"{self._ipinfo_url}/{ip}/json" if ip else f"{self._ipinfo_url}/json"
        data = await self._get_json("ipinfo.io", url)

        country_code = data.get("country")
        if not country_code:
            raise GeolocationProviderError("ipinfo.io", "missing country")

        latitude = longitude = None
        if data.get("loc"):
            try:
                lat_str, lon_str = data["loc"].split(",")
                latitude, longitude = float(lat_str), float(lon_str)
            except (AttributeError, TypeError, ValueError):
                logger.debug("ipinfo.io unparseable loc=%s", data["loc"])

        return GeoLocationResult(
            ip=data.get("ip") or ip or "unknown",
            country_code=country_code,
            country_name=country_code,
            city=data.get("city") or "",
            region=data.get("region") or "",
            timezone=data.get("timezone") or "",
            currency=currency_for_country(country_code),
            latitude=latitude,
            longitude=longitude,
        )
