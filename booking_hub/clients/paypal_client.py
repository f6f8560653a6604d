"""
PayPal HTTP client — OAuth client-credentials and v2 checkout orders.

Transport failures, non-JSON bodies and HTTP errors all surface as
ExternalAPIError("PayPal", ...).
"""
import logging
from typing import Any, Dict

import httpx

from booking_hub.core.config import Settings
from booking_hub.core.exceptions import ExternalAPIError

logger = logging.getLogger("paypal_client")


class PayPalClient:
    def __init__(self, settings: Settings) -> None:
        self._api_url = settings.paypal_api_url
        self._client_id = settings.paypal_client_id
        self._client_secret = settings.paypal_client_secret
        self._timeout = settings.external_timeout_seconds * 4

    async def _post(self, step: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        """POST to the PayPal API and return the decoded JSON body."""
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(f"{self._api_url}{path}", **kwargs)
        except httpx.TimeoutException as e:
            raise ExternalAPIError("PayPal", f"{step}: request timed out") from e
        except httpx.RequestError as e:
            raise ExternalAPIError("PayPal", f"{step}: network error: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("PayPal %s returned non-JSON body status=%s", step, resp.status_code)
            raise ExternalAPIError("PayPal", f"{step}: response is not JSON", resp.status_code) from e

        if not isinstance(data, dict):
            raise ExternalAPIError("PayPal", f"{step}: unexpected response shape", resp.status_code)

        if resp.status_code >= 400:
            logger.error("PayPal %s error status=%s body=%s", step, resp.status_code, data)
            message = data.get("message") or data.get("error_description") or f"{step} failed"
            raise ExternalAPIError("PayPal", message, resp.status_code)
        return data

    async def _get_access_token(self) -> str:
        if not (self._client_id and self._client_secret):
            raise ExternalAPIError(
                "PayPal", "PAYPAL_CLIENT_ID and PAYPAL_CLIENT_SECRET env vars are required"
            )

        data = await self._post(
            "OAuth",
            "/v1/oauth2/token",
            data={"grant_type": "client_credentials"},
            auth=(self._client_id, self._client_secret),
        )
        token = data.get("access_token")
        if not token:
            raise ExternalAPIError("PayPal", "No access_token in OAuth response")
        return token

    async def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {await self._get_access_token()}",
        }

    async def create_order(self, amount: str, currency: str = "USD") -> Dict[str, Any]:
        """Create a CAPTURE-intent order for ``amount`` in ``currency``."""
        body = {
            "intent": "CAPTURE",
            "purchase_units": [
                {"amount": {"currency_code": currency, "value": amount}},
            ],
        }
        data = await self._post(
            "create order", "/v2/checkout/orders", headers=await self._headers(), json=body
        )
        logger.info("PayPal order created id=%s amount=%s %s", data.get("id"), amount, currency)
        return data

    async def capture_order(self, order_id: str) -> Dict[str, Any]:
        """Capture a previously approved order."""
        data = await self._post(
            "capture", f"/v2/checkout/orders/{order_id}/capture", headers=await self._headers()
        )
        logger.info("PayPal order captured id=%s status=%s", order_id, data.get("status"))
        return data


def extract_capture_id(capture_data: Dict[str, Any]) -> str | None:
    """Pull the first capture id out of a capture-order response."""
    try:
        return capture_data["purchase_units"][0]["payments"]["captures"][0]["id"]
    except (KeyError, IndexError, TypeError):
        return None
