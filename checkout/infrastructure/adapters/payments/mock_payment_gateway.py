"""
Mock Payment Gateway Implementation.

This simulates a payment processor for testing and demos.
"""
from decimal import Decimal
from typing import List, Optional, Tuple
import logging

from checkout.application.interfaces import IPaymentGateway, PaymentResult
from checkout.settings import PaymentGatewaySettings


logger = logging.getLogger(__name__)


class MockPaymentGateway(IPaymentGateway):
    """
    Mock implementation of payment gateway.

    Records charges instead of contacting a processor. Declines when
    ``approve`` is False or the amount exceeds ``max_amount``.
    """

    def __init__(self, approve: bool = True, max_amount: Optional[Decimal] = None):
        """
        Initialize mock gateway.

        Args:
            approve: Whether charges are approved
            max_amount: Optional ceiling above which charges are declined
        """
        self.approve = approve
        self.max_amount = max_amount
        self.charges: List[Tuple[Decimal, str]] = []
        logger.info(
            f"MockPaymentGateway initialized (approve={approve}, max_amount={max_amount})"
        )

    @classmethod
    def from_settings(cls, settings: PaymentGatewaySettings) -> "MockPaymentGateway":
        return cls(approve=settings.approve, max_amount=settings.max_amount)

    async def charge(self, amount: Decimal, token: str) -> PaymentResult:
        """
        Simulate a charge.

        Args:
            amount: Amount to charge
            token: Payment token

        Returns:
            PaymentResult (never raises)
        """
        self.charges.append((amount, token))

        success = self.approve
        if self.max_amount is not None and amount > self.max_amount:
            success = False

        if success:
            logger.info(f"Charge approved: amount={amount} token=***{token[-4:]}")
        else:
            logger.info(f"Charge declined: amount={amount} token=***{token[-4:]}")

        return PaymentResult(success=success)

    def clear(self) -> None:
        """Clear recorded charges (for testing)."""
        self.charges.clear()
