"""
Unit tests for NotificationService and the e-mail templates.
"""
import pytest

from booking_hub.services.notification_service import (
    NotificationService,
    render_cancellation,
    render_confirmation,
)


@pytest.mark.unit
class TestTemplates:

    def test_confirmation_contains_reference_and_trip(self, sample_booking):
        html = render_confirmation(sample_booking)
        assert "BK-123456" in html
        assert "Dubai International Airport" in html
        assert "Pay on arrival" in html
        assert "Passenger Info" in html

    def test_confirmation_for_paid_rental(self, sample_booking):
        booking = sample_booking.model_copy(update={
            "booking_type": "rental", "payment_status": "paid", "dropoff_date": "2026-11-05",
        })
        html = render_confirmation(booking)
        assert "Paid via PayPal" in html
        assert "Driver Info" in html
        assert "2026-11-05" in html

    def test_user_input_is_escaped(self, sample_booking):
        booking = sample_booking.model_copy(update={"passenger_name": "<script>x</script>"})
        assert "<script>" not in render_confirmation(booking)
        assert "<script>" not in render_cancellation(booking)

    def test_cancellation(self, sample_booking):
        html = render_cancellation(sample_booking)
        assert "Booking Cancelled" in html
        assert "Sam Carter" in html


@pytest.mark.unit
class TestNotificationService:

    def test_confirmation_sent_to_admin_and_passenger(self, mock_resend_client, sample_booking):
        NotificationService(mock_resend_client, admin_email="admin@test.com").booking_confirmed(sample_booking)

        recipients = [call.args[0] for call in mock_resend_client.send_email.call_args_list]
        assert recipients == [["admin@test.com"], ["sam@test.com"]]
        subjects = [call.args[1] for call in mock_resend_client.send_email.call_args_list]
        assert all("BK-123456" in subject for subject in subjects)

    def test_cancellation_sent_twice(self, mock_resend_client, sample_booking):
        NotificationService(mock_resend_client, admin_email="admin@test.com").booking_cancelled(sample_booking)
        assert mock_resend_client.send_email.call_count == 2

    def test_delivery_errors_are_swallowed(self, mock_resend_client, sample_booking):
        mock_resend_client.send_email.side_effect = RuntimeError("resend down")
        NotificationService(mock_resend_client, admin_email="admin@test.com").booking_confirmed(sample_booking)
        assert mock_resend_client.send_email.call_count == 2
