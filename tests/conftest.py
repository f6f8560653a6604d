"""
Pytest configuration and shared fixtures for Rental Booking Hub tests.

Provides mock clients, stores, services, and sample test data.
"""
from datetime import datetime, timezone

import pytest
from unittest.mock import AsyncMock, MagicMock

from booking_hub.schemas.bookings import Booking, BookingCreate
from booking_hub.schemas.cars import CarCatalogEntry
from booking_hub.schemas.domains import TenantConfig


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_settings():
    """Settings object with test defaults (no real credentials)."""
    from booking_hub.core.config import Settings
    return Settings(
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-supabase-key",
        exchange_rate_api_url="https://rates.test/v6/latest",
        rates_base_currency="USD",
        geo_ip_api_url="http://ip-api.test/json",
        geo_ipapi_co_url="https://ipapi.test",
        geo_ipinfo_url="https://ipinfo.test",
        external_timeout_seconds=2.0,
        domain_lookup_max_attempts=3,
        domain_lookup_backoff_seconds=0,
        tenant_bypass_enabled=False,
        paypal_client_id="test-paypal-id",
        paypal_client_secret="test-paypal-secret",
        paypal_mode="sandbox",
        resend_api_key="re_test_key",
        resend_from_address="bookings@test.com",
        booking_admin_email="admin@test.com",
        cors_allow_origins=["*"],
    )


# ---------------------------------------------------------------------------
# Clients (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_supabase_client():
    """Mocked SupabaseClient with a chainable table query."""
    client = MagicMock()
    mock_table = MagicMock()
    mock_table.select.return_value = mock_table
    mock_table.insert.return_value = mock_table
    mock_table.update.return_value = mock_table
    mock_table.eq.return_value = mock_table
    mock_table.ilike.return_value = mock_table
    mock_table.order.return_value = mock_table
    mock_table.limit.return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[])
    client.client.table.return_value = mock_table
    return client


@pytest.fixture
def mock_resend_client():
    """Mocked ResendClient."""
    client = MagicMock()
    client.send_email = MagicMock(return_value="email-id-1")
    return client


@pytest.fixture
def mock_paypal_client():
    """Mocked PayPalClient."""
    client = MagicMock()
    client.create_order = AsyncMock(return_value={"id": "ORDER-1", "status": "CREATED"})
    client.capture_order = AsyncMock(return_value={
        "id": "ORDER-1",
        "status": "COMPLETED",
        "purchase_units": [{"payments": {"captures": [{"id": "CAPTURE-1"}]}}],
    })
    return client


# ---------------------------------------------------------------------------
# DB Stores (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_domain_store():
    """Mocked DomainStore."""
    store = MagicMock()
    store.get_by_domain_name = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_car_store():
    """Mocked CarStore."""
    store = MagicMock()
    store.list_cars = AsyncMock(return_value=[])
    return store


@pytest.fixture
def mock_theme_store():
    """Mocked ThemeStore."""
    store = MagicMock()
    store.get_theme = AsyncMock(return_value=None)
    store.get_active_theme = AsyncMock(return_value=None)
    store.list_themes = AsyncMock(return_value=[])
    store.insert_theme = AsyncMock(side_effect=lambda theme: theme)
    store.activate_theme = AsyncMock(return_value=True)
    return store


@pytest.fixture
def mock_booking_store():
    """Mocked BookingStore that echoes inserted bookings."""
    store = MagicMock()
    store.insert_booking = AsyncMock(side_effect=lambda booking: booking)
    store.reference_exists = AsyncMock(return_value=False)
    store.get_booking = AsyncMock(return_value=None)
    store.update_booking = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_notifier():
    """Mocked NotificationService."""
    notifier = MagicMock()
    notifier.booking_confirmed = MagicMock()
    notifier.booking_cancelled = MagicMock()
    return notifier


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_cars():
    """Raw catalog: three active transfer cars."""
    return [
        CarCatalogEntry(id="c1", car_type="transfer", name="Mercedes E-Class", type="Sedan", price=299),
        CarCatalogEntry(id="c2", car_type="transfer", name="Toyota HiAce", type="Van", price=150),
        CarCatalogEntry(id="c3", car_type="transfer", name="Toyota Corolla", type="Economy", price=80),
    ]


@pytest.fixture
def sample_tenant():
    """Active tenant overriding c1's price and hiding c2."""
    return TenantConfig(
        id="tenant-a",
        domain_name="a.example.com",
        theme_id="midnight-indigo",
        cars=[
            {"car_id": "c1", "price": 199, "is_visible": True},
            {"car_id": "c2", "is_visible": False},
        ],
        is_active=True,
    )


@pytest.fixture
def sample_booking_create():
    """Transfer booking payload as sent by the booking wizard."""
    return BookingCreate(
        booking_type="transfer",
        from_location="Dubai International Airport",
        to_location="Burj Al Arab",
        date="2026-11-01",
        pickup_time="14:30",
        passengers=2,
        currency="USD",
        total_price=120.0,
        selected_vehicle={"id": "c1", "name": "Mercedes E-Class", "price": 120.0},
        passenger_name="Sam Carter",
        email="sam@test.com",
        phone="501234567",
        country_code="+971",
    )


@pytest.fixture
def sample_rental_create(sample_booking_create):
    """Rental booking payload with a valid Pakistani licence."""
    return sample_booking_create.model_copy(update={
        "booking_type": "rental",
        "dropoff_date": "2026-11-05",
        "dropoff_time": "10:00",
        "license_number": "1234567890123",
        "license_country": "PK",
    })


@pytest.fixture
def now():
    return datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_booking(sample_booking_create, now):
    """Stored, unpaid booking created at ``now``."""
    return Booking(
        **sample_booking_create.model_dump(),
        booking_reference="BK-123456",
        status="pending",
        payment_status="unpaid",
        created_at=now,
    )
