"""
Unit tests for currency_service — pure conversion and the degrading service.
"""
import math

import pytest
from unittest.mock import AsyncMock, MagicMock

from booking_hub.core.exceptions import InvalidRateError, RatesUnavailable
from booking_hub.services.currency_service import (
    CurrencyService,
    convert,
    list_currencies,
    symbol_for,
)

RATES = {"USD": 1.0, "EUR": 0.92, "PKR": 278.5, "AED": 3.6725}


@pytest.fixture
def rates_client():
    client = MagicMock()
    client.fetch_rates = AsyncMock(return_value=dict(RATES))
    return client


@pytest.fixture
def service(rates_client):
    return CurrencyService(rates_client, base_currency="usd")


@pytest.mark.unit
class TestConvert:

    def test_same_rate_is_identity(self):
        assert convert(123.45, 0.92, 0.92) == pytest.approx(123.45)

    def test_base_to_target(self):
        assert convert(100, 1.0, 278.5) == pytest.approx(27850)

    def test_round_trip_returns_starting_amount(self):
        there = convert(100, RATES["USD"], RATES["EUR"])
        back = convert(there, RATES["EUR"], RATES["USD"])
        assert back == pytest.approx(100)

    def test_cross_rate(self):
        assert convert(92, RATES["EUR"], RATES["AED"]) == pytest.approx(100 * 3.6725)

    def test_no_rounding(self):
        assert convert(1, 3.0, 1.0) == pytest.approx(1 / 3)

    @pytest.mark.parametrize("bad", [0, -1.5, None, float("inf"), float("nan"), "abc", True])
    def test_invalid_from_rate_raises(self, bad):
        with pytest.raises(InvalidRateError):
            convert(10, bad, 1.0)

    @pytest.mark.parametrize("bad", [0, -2, None])
    def test_invalid_to_rate_raises(self, bad):
        with pytest.raises(InvalidRateError):
            convert(10, 1.0, bad)

    def test_numeric_string_rate_is_accepted(self):
        assert convert(10, "2", "4") == pytest.approx(20)


@pytest.mark.unit
class TestCurrencyTable:

    def test_list_contains_pkr(self):
        codes = {c.code: c for c in list_currencies()}
        assert codes["PKR"].symbol == "Rs"
        assert codes["USD"].name == "US Dollar"

    def test_symbol_for_known(self):
        assert symbol_for("gbp") == "£"

    def test_symbol_for_unknown_falls_back_to_code(self):
        assert symbol_for("XYZ") == "XYZ"


@pytest.mark.unit
class TestCurrencyService:

    @pytest.mark.asyncio
    async def test_fetch_rates_uses_configured_base(self, service, rates_client):
        await service.fetch_rates()
        rates_client.fetch_rates.assert_awaited_once_with("USD")

    @pytest.mark.asyncio
    async def test_fetch_rates_explicit_base_upper_cased(self, service, rates_client):
        await service.fetch_rates("eur")
        rates_client.fetch_rates.assert_awaited_once_with("EUR")

    def test_base_currency_property(self, service):
        assert service.base_currency == "USD"

    @pytest.mark.asyncio
    async def test_convert_amount_success(self, service):
        result = await service.convert_amount(100, "usd", "pkr")
        assert result.converted is True
        assert result.currency == "PKR"
        assert result.converted_amount == pytest.approx(27850)
        assert result.from_currency == "USD"
        assert result.to_currency == "PKR"

    @pytest.mark.asyncio
    async def test_same_currency_skips_fetch(self, service, rates_client):
        result = await service.convert_amount(50, "EUR", "eur")
        assert result.converted is True
        assert result.converted_amount == 50
        rates_client.fetch_rates.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rates_unavailable_degrades(self, service, rates_client):
        rates_client.fetch_rates.side_effect = RatesUnavailable("USD", "timeout")
        result = await service.convert_amount(100, "USD", "PKR")
        assert result.converted is False
        assert result.converted_amount == 100
        assert result.currency == "USD"

    @pytest.mark.asyncio
    async def test_unknown_code_degrades(self, service):
        result = await service.convert_amount(100, "USD", "XYZ")
        assert result.converted is False
        assert result.currency == "USD"
        assert result.converted_amount == 100

    @pytest.mark.asyncio
    async def test_zero_rate_degrades(self, service, rates_client):
        rates_client.fetch_rates.return_value = {"USD": 1.0, "EUR": 0}
        result = await service.convert_amount(100, "EUR", "USD")
        assert result.converted is False
        assert not math.isinf(result.converted_amount)
