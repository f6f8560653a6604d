"""
Lazy DI container — singleton access to clients, stores, and services.

Nothing is constructed at import time; the first call to a getter builds
the object and every later call returns the same instance.
Import individual getters to avoid circular imports.
"""

from functools import lru_cache

from booking_hub.core.config import settings
from booking_hub.clients.supabase_client import SupabaseClient
from booking_hub.clients.rates_client import RatesClient
from booking_hub.clients.geolocation_client import GeolocationClient
from booking_hub.clients.paypal_client import PayPalClient
from booking_hub.clients.resend_client import ResendClient
from booking_hub.db.domain_store import DomainStore
from booking_hub.db.car_store import CarStore
from booking_hub.db.theme_store import ThemeStore
from booking_hub.db.booking_store import BookingStore
from booking_hub.services.domain_service import DomainService
from booking_hub.services.catalog_service import CatalogService
from booking_hub.services.theme_service import ThemeService
from booking_hub.services.currency_service import CurrencyService
from booking_hub.services.geolocation_service import GeolocationService
from booking_hub.services.notification_service import NotificationService
from booking_hub.services.booking_service import BookingService
from booking_hub.services.payment_service import PaymentService


# -- Clients ---------------------------------------------------------------

@lru_cache(maxsize=1)
def get_supabase_client():
    return SupabaseClient(settings)


@lru_cache(maxsize=1)
def get_rates_client():
    return RatesClient(settings)


@lru_cache(maxsize=1)
def get_geolocation_client():
    return GeolocationClient(settings)


@lru_cache(maxsize=1)
def get_paypal_client():
    return PayPalClient(settings)


@lru_cache(maxsize=1)
def get_resend_client():
    return ResendClient(
        api_key=settings.resend_api_key,
        from_address=settings.resend_from_address,
    )


# -- DB Stores -------------------------------------------------------------

@lru_cache(maxsize=1)
def get_domain_store():
    return DomainStore(get_supabase_client())


@lru_cache(maxsize=1)
def get_car_store():
    return CarStore(get_supabase_client())


@lru_cache(maxsize=1)
def get_theme_store():
    return ThemeStore(get_supabase_client())


@lru_cache(maxsize=1)
def get_booking_store():
    return BookingStore(get_supabase_client())


# -- Resolution Services ---------------------------------------------------

@lru_cache(maxsize=1)
def get_domain_service():
    return DomainService(
        store=get_domain_store(),
        max_attempts=settings.domain_lookup_max_attempts,
        backoff_seconds=settings.domain_lookup_backoff_seconds,
        bypass_enabled=settings.tenant_bypass_enabled,
    )


@lru_cache(maxsize=1)
def get_catalog_service():
    return CatalogService(get_car_store())


@lru_cache(maxsize=1)
def get_theme_service():
    return ThemeService(get_theme_store())


@lru_cache(maxsize=1)
def get_currency_service():
    return CurrencyService(get_rates_client(), base_currency=settings.rates_base_currency)


@lru_cache(maxsize=1)
def get_geolocation_service():
    return GeolocationService(get_geolocation_client().providers)


# -- Booking Services ------------------------------------------------------

@lru_cache(maxsize=1)
def get_notification_service():
    return NotificationService(get_resend_client(), admin_email=settings.booking_admin_email)


@lru_cache(maxsize=1)
def get_booking_service():
    return BookingService(store=get_booking_store(), notifier=get_notification_service())


@lru_cache(maxsize=1)
def get_payment_service():
    return PaymentService(client=get_paypal_client(), bookings=get_booking_service())
