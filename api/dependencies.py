"""
FastAPI Dependencies.

Provides dependency injection for the checkout service and its collaborators.
"""
from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from checkout.application.services import CheckoutService
from checkout.infrastructure.adapters.notifications import MockNotificationService
from checkout.infrastructure.adapters.payments import MockPaymentGateway
from checkout.infrastructure.adapters.persistence import MockOrderRepository
from checkout.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES (for demo/testing)
# =============================================================================

_payment_gateway = None
_order_repository = None
_notification_service = None
_checkout_service = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_payment_gateway() -> MockPaymentGateway:
    global _payment_gateway
    if _payment_gateway is None:
        _payment_gateway = MockPaymentGateway.from_settings(get_app_settings().gateway)
        logger.info("Created MockPaymentGateway instance")
    return _payment_gateway


def get_order_repository() -> MockOrderRepository:
    global _order_repository
    if _order_repository is None:
        settings = get_app_settings()
        _order_repository = MockOrderRepository(id_prefix=settings.checkout.order_id_prefix)
        logger.info("Created MockOrderRepository instance")
    return _order_repository


def get_notification_service() -> MockNotificationService:
    global _notification_service
    if _notification_service is None:
        settings = get_app_settings()
        _notification_service = MockNotificationService(sender=settings.checkout.sender_email)
        logger.info("Created MockNotificationService instance")
    return _notification_service


def get_checkout_service() -> CheckoutService:
    global _checkout_service
    if _checkout_service is None:
        _checkout_service = CheckoutService(
            gateway=get_payment_gateway(),
            repository=get_order_repository(),
            notifier=get_notification_service(),
        )
        logger.info("Created CheckoutService instance")
    return _checkout_service


def reset_dependencies() -> None:
    """Drop cached singletons (for testing)."""
    global _payment_gateway, _order_repository, _notification_service, _checkout_service
    _payment_gateway = None
    _order_repository = None
    _notification_service = None
    _checkout_service = None
