"""
Currency service — currency table, live rates and conversion.

``convert`` is a pure function over two rates quoted against the same
base. ``CurrencyService.convert_amount`` wraps it with a live rate fetch
and never raises: when anything is missing the source amount comes back
unconverted so the caller can still display a price.
"""
import logging
import math
from typing import Any, Dict, List

from booking_hub.clients.rates_client import RatesClient
from booking_hub.core.constants.currency import BASE_CURRENCY, CURRENCIES
from booking_hub.core.exceptions import InvalidRateError, RatesUnavailable
from booking_hub.schemas.currency import ConversionResult, CurrencyInfo

logger = logging.getLogger(__name__)


def _check_rate(name: str, rate: Any) -> float:
    if rate is None or isinstance(rate, bool):
        raise InvalidRateError(f"{name} is missing")
    try:
        value = float(rate)
    except (TypeError, ValueError) as e:
        raise InvalidRateError(f"{name} is not a number: {rate!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise InvalidRateError(f"{name} must be a positive finite number, got {rate!r}")
    return value


def convert(amount: float, from_rate: float, to_rate: float) -> float:
    """
    Convert ``amount`` between two rates quoted against the same base.

    No rounding is applied.

    Raises:
        InvalidRateError: if either rate is missing, zero, negative or not finite.
    """
    from_value = _check_rate("from_rate", from_rate)
    to_value = _check_rate("to_rate", to_rate)
    return amount * (to_value / from_value)


def list_currencies() -> List[CurrencyInfo]:
    return [
        CurrencyInfo(code=code, name=name, symbol=symbol)
        for code, (name, symbol) in CURRENCIES.items()
    ]


def symbol_for(code: str) -> str:
    """Display symbol for a currency code; the code itself when unknown."""
    entry = CURRENCIES.get((code or "").upper())
    return entry[1] if entry else code


class CurrencyService:
    def __init__(self, client: RatesClient, base_currency: str = BASE_CURRENCY) -> None:
        self._client = client
        self._base_currency = base_currency.upper()

    @property
    def base_currency(self) -> str:
        return self._base_currency

    async def fetch_rates(self, base: str | None = None) -> Dict[str, float]:
        """Live rates keyed by ``base``. Raises RatesUnavailable."""
        return await self._client.fetch_rates((base or self._base_currency).upper())

    async def convert_amount(self, amount: float, from_code: str, to_code: str) -> ConversionResult:
        from_code = from_code.upper()
        to_code = to_code.upper()

        unconverted = ConversionResult(
            amount=amount,
            from_currency=from_code,
            to_currency=to_code,
            converted_amount=amount,
            currency=from_code,
            converted=False,
        )

        if from_code == to_code:
            return unconverted.model_copy(update={"converted": True})

        try:
            rates = await self.fetch_rates()
        except RatesUnavailable as e:
            logger.warning("rates unavailable, showing %s unconverted: %s", from_code, e)
            return unconverted

        try:
            value = convert(amount, rates.get(from_code), rates.get(to_code))
        except InvalidRateError as e:
            logger.warning("cannot convert %s -> %s: %s", from_code, to_code, e)
            return unconverted

        return ConversionResult(
            amount=amount,
            from_currency=from_code,
            to_currency=to_code,
            converted_amount=value,
            currency=to_code,
            converted=True,
        )
