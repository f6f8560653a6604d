"""
Booking schemas — booking request/response and payment models.
"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    lat: float
    lon: float


class SelectedVehicle(BaseModel):
    id: str
    name: str
    type: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None


class RentalExtras(BaseModel):
    additional_driver: int = 0
    child_seat: int = 0
    booster_seat: int = 0


class BookingCreate(BaseModel):
    """
    Booking submitted by the wizard.

    Transfer bookings carry passengers and luggage; rental bookings carry
    dropoff date/time, extras and the driver's licence number.
    """
    booking_type: Literal["transfer", "rental"] = "transfer"

    # Trip
    from_location: str
    to_location: str
    date: str
    pickup_time: str
    passengers: Optional[int] = None

    # Rental
    dropoff_date: Optional[str] = None
    dropoff_time: Optional[str] = None
    license_number: Optional[str] = None
    license_country: Optional[str] = Field(
        None, description="Country the licence was issued in; the International rule applies when absent"
    )
    rental_extras: Optional[RentalExtras] = None

    from_coords: Optional[Coordinates] = None
    to_coords: Optional[Coordinates] = None
    estimated_time: Optional[str] = None
    estimated_distance: Optional[str] = None

    currency: str = "USD"
    total_price: float = Field(..., ge=0)
    selected_vehicle: SelectedVehicle

    pickup_address: Optional[str] = None
    destination_address: Optional[str] = None
    special_instructions: Optional[str] = None
    small_luggage: Optional[int] = None
    medium_luggage: Optional[int] = None

    # Passenger / driver
    passenger_title: Optional[str] = None
    passenger_name: str
    email: str
    phone: str
    country_code: Optional[str] = None


class Booking(BookingCreate):
    """Stored booking."""
    booking_reference: str
    status: Literal["pending", "confirmed", "cancelled"] = "pending"
    payment_status: Literal["unpaid", "paid", "refunded"] = "unpaid"
    paypal_order_id: Optional[str] = None
    paypal_capture_id: Optional[str] = None
    created_at: datetime


class BookingCreatedResponse(BaseModel):
    success: bool = True
    message: str
    booking_reference: str
    booking: Booking


class BookingCancelledResponse(BaseModel):
    success: bool = True
    message: str
    booking: Booking


class CreateOrderRequest(BaseModel):
    amount: float = Field(..., gt=0)
    currency: str = "USD"


class CreateOrderResponse(BaseModel):
    id: str
    status: str


class CaptureOrderRequest(BaseModel):
    order_id: str = Field(..., min_length=1)
    booking: BookingCreate
