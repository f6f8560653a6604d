"""
Integration tests for booking and payment routes.

Tests /api/v1/bookings and /api/v1/payments.
Verifies request validation, service delegation and error-to-status mapping.
"""
import pytest
from unittest.mock import patch, MagicMock, AsyncMock

from fastapi.testclient import TestClient

from booking_hub.core.exceptions import (
    BookingNotFoundError,
    CancellationNotAllowedError,
    ConfigStoreError,
    ExternalAPIError,
    PaymentError,
    ValidationError,
)


@pytest.fixture
def client():
    from booking_hub.main import app
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def booking_payload(sample_booking_create):
    return sample_booking_create.model_dump(mode="json")


@pytest.mark.integration
class TestCreateBooking:
    """Tests for POST /api/v1/bookings."""

    @patch("booking_hub.routes.bookings._get_service")
    def test_created(self, mock_get_service, client, booking_payload, sample_booking):
        mock_service = MagicMock()
        mock_service.create_booking = AsyncMock(return_value=sample_booking)
        mock_get_service.return_value = mock_service

        response = client.post("/api/v1/bookings", json=booking_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["booking_reference"] == "BK-123456"
        assert data["booking"]["status"] == "pending"

    @patch("booking_hub.routes.bookings._get_service")
    def test_invalid_licence_is_422(self, mock_get_service, client, booking_payload):
        mock_service = MagicMock()
        mock_service.create_booking = AsyncMock(
            side_effect=ValidationError("Pakistan license requires at least 13 characters. You entered 12.")
        )
        mock_get_service.return_value = mock_service

        response = client.post("/api/v1/bookings", json=booking_payload)

        assert response.status_code == 422
        assert "Pakistan" in response.json()["detail"]

    def test_missing_fields_is_422(self, client):
        assert client.post("/api/v1/bookings", json={"booking_type": "transfer"}).status_code == 422

    @patch("booking_hub.routes.bookings._get_service")
    def test_store_error_is_503(self, mock_get_service, client, booking_payload):
        mock_service = MagicMock()
        mock_service.create_booking = AsyncMock(side_effect=ConfigStoreError("down"))
        mock_get_service.return_value = mock_service
        assert client.post("/api/v1/bookings", json=booking_payload).status_code == 503


@pytest.mark.integration
class TestGetAndCancelBooking:

    @patch("booking_hub.routes.bookings._get_service")
    def test_get_upper_cases_reference(self, mock_get_service, client, sample_booking):
        mock_service = MagicMock()
        mock_service.get_booking = AsyncMock(return_value=sample_booking)
        mock_get_service.return_value = mock_service

        response = client.get("/api/v1/bookings/bk-123456")

        assert response.status_code == 200
        mock_service.get_booking.assert_awaited_once_with("BK-123456")

    @patch("booking_hub.routes.bookings._get_service")
    def test_get_missing_is_404(self, mock_get_service, client):
        mock_service = MagicMock()
        mock_service.get_booking = AsyncMock(side_effect=BookingNotFoundError("BK-000000"))
        mock_get_service.return_value = mock_service
        assert client.get("/api/v1/bookings/BK-000000").status_code == 404

    @patch("booking_hub.routes.bookings._get_service")
    def test_cancel(self, mock_get_service, client, sample_booking):
        mock_service = MagicMock()
        mock_service.cancel_booking = AsyncMock(
            return_value=sample_booking.model_copy(update={"status": "cancelled"})
        )
        mock_get_service.return_value = mock_service

        response = client.patch("/api/v1/bookings/BK-123456/cancel")

        assert response.status_code == 200
        assert response.json()["booking"]["status"] == "cancelled"

    @patch("booking_hub.routes.bookings._get_service")
    def test_cancel_outside_window_is_400(self, mock_get_service, client):
        mock_service = MagicMock()
        mock_service.cancel_booking = AsyncMock(
            side_effect=CancellationNotAllowedError("Cancellation is only allowed within 24 hours of booking creation.")
        )
        mock_get_service.return_value = mock_service

        response = client.patch("/api/v1/bookings/BK-123456/cancel")

        assert response.status_code == 400
        assert "24 hours" in response.json()["detail"]

    @patch("booking_hub.routes.bookings._get_service")
    def test_cancel_missing_is_404(self, mock_get_service, client):
        mock_service = MagicMock()
        mock_service.cancel_booking = AsyncMock(side_effect=BookingNotFoundError("BK-000000"))
        mock_get_service.return_value = mock_service
        assert client.patch("/api/v1/bookings/BK-000000/cancel").status_code == 404


@pytest.mark.integration
class TestPayments:
    """Tests for /api/v1/payments."""

    @patch("booking_hub.routes.payments._get_service")
    def test_create_order(self, mock_get_service, client):
        mock_service = MagicMock()
        mock_service.create_order = AsyncMock(return_value={"id": "ORDER-1", "status": "CREATED"})
        mock_get_service.return_value = mock_service

        response = client.post("/api/v1/payments/create-order", json={"amount": 120, "currency": "USD"})

        assert response.status_code == 200
        assert response.json() == {"id": "ORDER-1", "status": "CREATED"}

    def test_create_order_zero_amount_is_422(self, client):
        assert client.post("/api/v1/payments/create-order", json={"amount": 0}).status_code == 422

    @patch("booking_hub.routes.payments._get_service")
    def test_create_order_paypal_error_is_502(self, mock_get_service, client):
        mock_service = MagicMock()
        mock_service.create_order = AsyncMock(side_effect=ExternalAPIError("PayPal", "down", 500))
        mock_get_service.return_value = mock_service
        assert client.post("/api/v1/payments/create-order", json={"amount": 10}).status_code == 502

    @patch("booking_hub.routes.payments._get_service")
    def test_capture_creates_paid_booking(self, mock_get_service, client, booking_payload, sample_booking):
        paid = sample_booking.model_copy(update={
            "status": "confirmed", "payment_status": "paid",
            "paypal_order_id": "ORDER-1", "paypal_capture_id": "CAPTURE-1",
        })
        mock_service = MagicMock()
        mock_service.capture_and_book = AsyncMock(return_value=paid)
        mock_get_service.return_value = mock_service

        response = client.post(
            "/api/v1/payments/capture-order", json={"order_id": "ORDER-1", "booking": booking_payload}
        )

        assert response.status_code == 201
        booking = response.json()["booking"]
        assert booking["payment_status"] == "paid"
        assert booking["paypal_capture_id"] == "CAPTURE-1"

    @patch("booking_hub.routes.payments._get_service")
    def test_capture_not_completed_is_400(self, mock_get_service, client, booking_payload):
        mock_service = MagicMock()
        mock_service.capture_and_book = AsyncMock(side_effect=PaymentError("Payment not completed"))
        mock_get_service.return_value = mock_service

        response = client.post(
            "/api/v1/payments/capture-order", json={"order_id": "ORDER-1", "booking": booking_payload}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Payment not completed"
