"""
Currency schemas — currency table, live rates and conversion results.
"""
from typing import Dict, List

from pydantic import BaseModel


class CurrencyInfo(BaseModel):
    code: str
    name: str
    symbol: str


class CurrencyListResponse(BaseModel):
    currencies: List[CurrencyInfo]


class RatesResponse(BaseModel):
    base: str
    rates: Dict[str, float]


class ConversionResult(BaseModel):
    """
    Result of converting an amount between two currencies.

    When rates are unavailable the source amount comes back unchanged
    with converted=False and currency equal to the source currency.
    """
    amount: float
    from_currency: str
    to_currency: str
    converted_amount: float
    currency: str
    converted: bool
