"""Notification adapters."""

from .mock_notification_service import MockNotificationService

__all__ = ["MockNotificationService"]
