"""
Custom exception hierarchy for Rental Booking Hub.

Exceptions are categorized as:
- RetryableError: Transient failures of an external collaborator
- NonRetryableError: Permanent errors that retrying will not fix

Resolution code (tenant, theme, geolocation, currency) catches the
retryable branch and falls back; the booking and payment routes map the
non-retryable branch onto HTTP status codes.
"""


class BookingHubException(Exception):
    """Base exception for Rental Booking Hub."""
    pass


# ============================================
# RETRYABLE ERRORS - external collaborator failed
# ============================================
class RetryableError(BookingHubException):
    """
    Base class for transient errors.

    Use this for failures where a later attempt might succeed:
    - Network timeouts
    - Provider outages
    - Malformed provider responses
    """
    pass


class ExternalAPIError(RetryableError):
    """
    Error from an external API (PayPal, rate provider, ...).
    """
    def __init__(self, service: str, message: str, status_code: int = None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service} API error: {message}")


class RatesUnavailable(RetryableError):
    """Exchange rates could not be fetched for the requested base."""
    def __init__(self, base: str, reason: str = ""):
        self.base = base
        message = f"Exchange rates unavailable for base {base}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class GeolocationProviderError(RetryableError):
    """A single geolocation provider failed (network, payload or error field)."""
    def __init__(self, provider: str, reason: str):
        self.provider = provider
        super().__init__(f"{provider} failed: {reason}")


class ConfigStoreError(RetryableError):
    """The tenant/theme/car store could not be read."""
    pass


# ============================================
# NON-RETRYABLE ERRORS
# ============================================
class NonRetryableError(BookingHubException):
    """
    Base class for errors that should NOT trigger retry.

    Use this for permanent errors where retrying won't help:
    - Validation failures
    - Missing records
    - Business-rule refusals
    """
    pass


class ValidationError(NonRetryableError):
    """Invalid input data - retrying won't help."""
    pass


class InvalidRateError(NonRetryableError):
    """A conversion rate is zero, negative or missing."""
    pass


class BookingNotFoundError(NonRetryableError):
    """No booking exists for the given reference."""
    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"Booking {reference} not found")


class CancellationNotAllowedError(NonRetryableError):
    """Booking is already cancelled or outside the cancellation window."""
    pass


class PaymentError(NonRetryableError):
    """
    Payment was not completed.

    The order exists but capture did not reach COMPLETED.
    """
    pass
