"""Application services."""

from .checkout_service import APPROVAL_SUBJECT, CheckoutService

__all__ = ["APPROVAL_SUBJECT", "CheckoutService"]
