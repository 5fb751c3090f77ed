"""Application layer interfaces."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a charge attempt. A decline is ``success=False``."""
    success: bool


class IPaymentGateway(ABC):
    """
    Interface for payment gateway operations.

    Business declines are reported through ``PaymentResult.success``;
    implementations raise only for infrastructure faults.
    """

    @abstractmethod
    async def charge(self, amount: Decimal, token: str) -> PaymentResult:
        """
        Charge an amount against a payment token.

        Args:
            amount: Final amount to charge
            token: Opaque payment token (card token)

        Returns:
            PaymentResult with success flag
        """
        pass


class INotificationService(ABC):
    """
    Interface for notification service operations.

    This interface defines the contract for sending customer emails,
    allowing different implementations (SMTP, provider API, mock, etc.)
    """

    @abstractmethod
    async def send_email(self, to: str, subject: str, body: str) -> None:
        """
        Send an email.

        Args:
            to: Recipient address
            subject: Email subject
            body: Plain-text body

        Raises:
            Exception: Any transport failure
        """
        pass


__all__ = ["INotificationService", "IPaymentGateway", "PaymentResult"]
