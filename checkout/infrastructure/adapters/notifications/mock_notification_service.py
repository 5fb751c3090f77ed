"""
Mock Notification Service Implementation.

This simulates email delivery for testing and demos.
"""
from typing import Dict, List, Optional
import logging

from checkout.application.interfaces import INotificationService


logger = logging.getLogger(__name__)


class MockNotificationService(INotificationService):
    """
    Mock implementation of notification service.

    Logs emails instead of actually sending them. When ``fail_with`` is
    set, every send is recorded and then raises that exception.
    """

    def __init__(
        self,
        sender: str = "no-reply@checkout.local",
        fail_with: Optional[Exception] = None,
    ):
        """
        Initialize mock notification service.

        Args:
            sender: From address recorded with each email
            fail_with: Exception raised on every send (simulated outage)
        """
        self.sender = sender
        self.fail_with = fail_with
        self.emails_sent: List[Dict[str, str]] = []
        logger.info("MockNotificationService initialized (console logging)")

    async def send_email(self, to: str, subject: str, body: str) -> None:
        """
        Simulate sending an email.

        Args:
            to: Recipient address
            subject: Email subject
            body: Email body
        """
        self.emails_sent.append(
            {"from": self.sender, "to": to, "subject": subject, "body": body}
        )

        if self.fail_with is not None:
            logger.error(f"EMAIL FAILED to {to}: {self.fail_with}")
            raise self.fail_with

        logger.info(
            f"EMAIL SENT:\n"
            f"   To: {to}\n"
            f"   Subject: {subject}\n"
            f"   Body: {body}"
        )

    def get_emails(self) -> List[Dict[str, str]]:
        """Get all recorded emails (for testing)."""
        return self.emails_sent

    def clear(self) -> None:
        """Clear recorded emails (for testing)."""
        self.emails_sent.clear()
