"""
Currency routes — currency table, live rates and display conversion.

Provides:
- GET /currency/currencies – supported currencies with symbols
- GET /currency/rates      – live rates for a base currency
- GET /currency/convert    – convert an amount, degrading to the source amount
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from booking_hub.container import get_currency_service
from booking_hub.core.exceptions import RatesUnavailable
from booking_hub.schemas.currency import ConversionResult, CurrencyListResponse, RatesResponse
from booking_hub.services.currency_service import CurrencyService, list_currencies

router = APIRouter(prefix="/currency", tags=["currency"])


def _get_service() -> CurrencyService:
    return get_currency_service()


@router.get("/currencies", response_model=CurrencyListResponse)
async def get_currencies() -> CurrencyListResponse:
    return CurrencyListResponse(currencies=list_currencies())


@router.get("/rates", response_model=RatesResponse)
async def get_rates(base: Optional[str] = Query(None, min_length=3, max_length=3)) -> RatesResponse:
    service = _get_service()
    try:
        rates = await service.fetch_rates(base)
    except RatesUnavailable as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return RatesResponse(base=(base or service.base_currency).upper(), rates=rates)


@router.get("/convert", response_model=ConversionResult)
async def convert_currency(
    amount: float = Query(..., ge=0),
    from_currency: str = Query(..., alias="from", min_length=3, max_length=3),
    to_currency: str = Query(..., alias="to", min_length=3, max_length=3),
) -> ConversionResult:
    return await _get_service().convert_amount(amount, from_currency, to_currency)
