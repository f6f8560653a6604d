"""
Car schemas — catalog entries as stored and as served to the booking wizard.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class CarType(str, Enum):
    TRANSFER = "transfer"
    RENTAL = "rental"


class CarCatalogEntry(BaseModel):
    """Row of the cars table."""
    id: str
    car_type: CarType
    name: str
    type: str
    price: float
    currency: str = "USD"
    is_active: bool = True
    image: str = "/placeholder-car.png"
    description: str = ""

    # Transfer fields
    passengers: int = 0
    medium_luggage: int = 0
    small_luggage: int = 0
    rating: float = 5
    cancellation_policy: str = "Free Cancellation 24h"

    # Rental fields
    category: str = ""
    seats: int = 0
    bags: int = 0
    transmission: str = "Automatic"
    price_per_day: float = 0
    fuel_type: str = "Petrol"
    pickup_location: str = ""
    features: List[str] = []


class CatalogResponse(BaseModel):
    """Effective catalog for the requesting tenant."""
    tenant_key: Optional[str] = None
    status: str
    cars: List[CarCatalogEntry]
    total: int
