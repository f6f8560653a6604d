"""
Booking constants — reference format and cancellation policy.
"""

BOOKING_REFERENCE_PREFIX = "BK-"
BOOKING_REFERENCE_DIGITS = 6

# Cancellation is allowed this many hours after creation
CANCELLATION_WINDOW_HOURS = 24

BOOKING_TYPES = ("transfer", "rental")
BOOKING_STATUSES = ("pending", "confirmed", "cancelled")
PAYMENT_STATUSES = ("unpaid", "paid", "refunded")

PAYPAL_COMPLETED_STATUS = "COMPLETED"
