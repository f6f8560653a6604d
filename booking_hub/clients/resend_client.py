"""
Resend email client — booking confirmation and cancellation delivery.
"""
import logging
from typing import Optional

import resend

logger = logging.getLogger(__name__)


class ResendClient:
    """Synchronous wrapper around the Resend SDK.

    Without an API key the client stays disabled and every send is a
    logged no-op, so bookings keep working on environments without mail.
    """

    def __init__(self, api_key: Optional[str], from_address: str):
        self._enabled = bool(api_key)
        if self._enabled:
            resend.api_key = api_key
        self._from_address = from_address

    @property
    def enabled(self) -> bool:
        return self._enabled

    def send_email(self, to: list[str], subject: str, html_body: str) -> Optional[str]:
        """Send an HTML email and return the Resend message id.

        Empty recipients are dropped. Returns None when the client is
        disabled or no recipient is left.
        """
        recipients = [address for address in to if address]
        if not self._enabled or not recipients:
            logger.info("email skipped subject=%r enabled=%s recipients=%d",
                        subject, self._enabled, len(recipients))
            return None

        params: resend.Emails.SendParams = {
            "from": self._from_address,
            "to": recipients,
            "subject": subject,
            "html": html_body,
        }
        response = resend.Emails.send(params)
        message_id = response.get("id") if isinstance(response, dict) else getattr(response, "id", None)
        logger.info("email sent subject=%r to=%s id=%s", subject, recipients, message_id)
        return message_id
