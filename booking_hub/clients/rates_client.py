"""
Exchange-rate HTTP client — live rates keyed by a base currency.
"""
import logging
from typing import Dict

import httpx

from booking_hub.core.config import Settings
from booking_hub.core.exceptions import RatesUnavailable

logger = logging.getLogger("rates_client")


class RatesClient:
    def __init__(self, settings: Settings) -> None:
        self._api_url = settings.exchange_rate_api_url.rstrip("/")
        self._timeout = settings.external_timeout_seconds

    async def fetch_rates(self, base: str) -> Dict[str, float]:
        """
        Fetch live rates relative to ``base``.

        The base currency is pinned to 1.0 and non-positive or non-numeric
        rates are dropped, so every returned rate is safe to divide by.

        Raises:
            RatesUnavailable: on transport errors, timeouts, non-200
                responses or payloads without a rates mapping.
        """
        base = base.upper()
        url = f"{self._api_url}/{base}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(url)
        except httpx.TimeoutException as e:
            raise RatesUnavailable(base, "request timed out") from e
        except httpx.RequestError as e:
            raise RatesUnavailable(base, f"network error: {e}") from e

        if resp.status_code != 200:
            raise RatesUnavailable(base, f"HTTP {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as e:
            raise RatesUnavailable(base, "response is not JSON") from e

        if body.get("result") not in (None, "success"):
            raise RatesUnavailable(base, str(body.get("error-type") or body.get("result")))

        raw_rates = body.get("rates")
        if not isinstance(raw_rates, dict) or not raw_rates:
            raise RatesUnavailable(base, "no rates in response")

        rates: Dict[str, float] = {}
        for code, value in raw_rates.items():
            try:
                rate = float(value)
            except (TypeError, ValueError):
                continue
            if rate > 0:
                rates[code.upper()] = rate
        rates[base] = 1.0

        logger.info("fetched %d rates base=%s", len(rates), base)
        return rates
