"""
Notification service — booking confirmation and cancellation e-mails.

Delivery problems are logged and swallowed: a booking is never rolled
back or refused because an e-mail could not be sent.
"""
import logging
from datetime import datetime, timezone
from html import escape
from typing import Optional

from booking_hub.clients.resend_client import ResendClient
from booking_hub.core.constants.bookings import CANCELLATION_WINDOW_HOURS
from booking_hub.schemas.bookings import Booking

logger = logging.getLogger(__name__)


def _row(label: str, value) -> str:
    if value in (None, ""):
        return ""
    return f'<p style="margin: 8px 0; color: #334155;"><strong>{escape(label)}:</strong> {escape(str(value))}</p>'


def render_confirmation(booking: Booking) -> str:
    is_rental = booking.booking_type == "rental"
    trip_rows = [
        _row("From", booking.from_location),
        _row("To", booking.to_location),
        _row("Pickup Date", booking.date),
        _row("Pickup Time", booking.pickup_time),
    ]
    if is_rental:
        trip_rows += [_row("Dropoff Date", booking.dropoff_date), _row("Dropoff Time", booking.dropoff_time)]
    else:
        trip_rows.append(_row("Passengers", booking.passengers))

    payment = "Paid via PayPal" if booking.payment_status == "paid" else "Pay on arrival"
    person = "Driver" if is_rental else "Passenger"
    reference = escape(booking.booking_reference)

    return f"""
<div style="font-family: 'Segoe UI', Tahoma, sans-serif; max-width: 600px; margin: 0 auto;">
  <div style="background: #0d9488; padding: 30px; text-align: center;">
    <h1 style="color: #ffffff; margin: 0;">Booking Confirmation</h1>
    <p style="color: #ccfbf1;">Reference: <strong>{reference}</strong></p>
  </div>
  <div style="padding: 30px;">
    <h2>New {"Car Rental" if is_rental else "Transfer"} Booking</h2>
    <h3>Trip Details</h3>
    {"".join(trip_rows)}
    <h3>Vehicle &amp; Price</h3>
    {_row("Vehicle", booking.selected_vehicle.name)}
    {_row("Total Price", f"{booking.currency} {booking.total_price}")}
    {_row("Payment Status", payment)}
    <h3>{person} Info</h3>
    {_row("Name", f"{booking.passenger_title or ''} {booking.passenger_name}".strip())}
    {_row("Email", booking.email)}
    {_row("Phone", f"{booking.country_code or ''} {booking.phone}".strip())}
    <p style="color: #92400e;">You can cancel this booking within {CANCELLATION_WINDOW_HOURS} hours of creation
    using reference <strong>{reference}</strong>.</p>
  </div>
  <p style="text-align: center; color: #64748b; font-size: 12px;">&copy; {datetime.now(timezone.utc).year} Booking System</p>
</div>
"""


def render_cancellation(booking: Booking) -> str:
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <div style="background: #ef4444; padding: 30px; text-align: center;">
    <h1 style="color: #ffffff; margin: 0;">Booking Cancelled</h1>
    <p style="color: #fee2e2;">Reference: {escape(booking.booking_reference)}</p>
  </div>
  <div style="padding: 30px;">
    <p>Hello {escape(booking.passenger_name)},</p>
    <p>Your booking has been cancelled as requested within the {CANCELLATION_WINDOW_HOURS}-hour window.</p>
    <p><strong>Refund Status:</strong> If you made a payment, our team will process your refund shortly.</p>
  </div>
</div>
"""


class NotificationService:
    def __init__(self, client: ResendClient, admin_email: Optional[str] = None) -> None:
        self._client = client
        self._admin_email = admin_email

    def _send(self, to: list[str], subject: str, html_body: str) -> None:
        try:
            self._client.send_email(to, subject, html_body)
        except Exception as e:
            logger.error("email delivery failed subject=%r: %s", subject, e)

    def booking_confirmed(self, booking: Booking) -> None:
        html_body = render_confirmation(booking)
        ref = booking.booking_reference
        self._send([self._admin_email], f"NEW BOOKING: {booking.passenger_name} - {ref}", html_body)
        self._send([booking.email], f"Your Booking Confirmation - {ref}", html_body)

    def booking_cancelled(self, booking: Booking) -> None:
        html_body = render_cancellation(booking)
        ref = booking.booking_reference
        self._send([self._admin_email], f"BOOKING CANCELLED: {booking.passenger_name} - {ref}", html_body)
        self._send([booking.email], f"Booking Cancellation Confirmation - {ref}", html_body)
