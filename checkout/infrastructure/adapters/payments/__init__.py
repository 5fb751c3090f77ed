"""Payment gateway adapters."""

from .mock_payment_gateway import MockPaymentGateway

__all__ = ["MockPaymentGateway"]
