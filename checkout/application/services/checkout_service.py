"""
Checkout Service.

Drives the checkout workflow:
1. Compute final total (tier discount applied)
2. Charge the payment gateway
3. Persist the order (only after a successful charge)
4. Email the customer (best-effort)
5. Return the persisted order
"""
import logging
from decimal import Decimal
from typing import Optional

from checkout.application.interfaces import INotificationService, IPaymentGateway
from checkout.domain.entities import Cart, Order
from checkout.domain.pricing import calculate_total, format_amount
from checkout.domain.repositories import OrderRepository


logger = logging.getLogger(__name__)

APPROVAL_SUBJECT = "Your Order was Approved!"


class CheckoutService:
    """
    Stateless checkout orchestrator.

    Collaborators are injected at construction; the service keeps no
    per-checkout state, so concurrent ``process_order`` calls need no
    coordination.
    """

    def __init__(
        self,
        gateway: IPaymentGateway,
        repository: OrderRepository,
        notifier: INotificationService,
    ):
        """
        Initialize service with dependencies.

        Args:
            gateway: Payment gateway used to charge the customer
            repository: Repository that persists charged orders
            notifier: Service that emails the customer
        """
        self.gateway = gateway
        self.repository = repository
        self.notifier = notifier

    async def process_order(self, cart: Cart, payment_token: str) -> Optional[Order]:
        """
        Check out a cart.

        Args:
            cart: Cart to charge
            payment_token: Payment token forwarded to the gateway

        Returns:
            The persisted Order, or None when the payment was declined

        Raises:
            Exception: Gateway or repository faults propagate unchanged
        """
        user = cart.user
        total_final = calculate_total(cart)

        logger.info(
            f"Checkout started: user={user.id} items={len(cart.items)} "
            f"tier={user.tier.value} total={total_final}"
        )

        result = await self.gateway.charge(total_final, payment_token)
        if not result.success:
            logger.info(f"Payment declined for user {user.id} (amount={total_final})")
            return None

        try:
            order = await self.repository.save(cart, total_final)
        except Exception as e:
            logger.error(
                f"Order persistence failed after successful charge "
                f"(user={user.id}, amount={total_final}): {e}",
                exc_info=True,
            )
            raise

        logger.info(f"Order {order.id} persisted (status: {order.status.value})")

        await self._notify_approved(order, cart, total_final)

        return order

    async def _notify_approved(self, order: Order, cart: Cart, total_final: Decimal) -> None:
        """Send the approval email. Failures are logged and discarded."""
        body = f"Order {order.id} for ${format_amount(total_final)}"
        try:
            await self.notifier.send_email(cart.user.email, APPROVAL_SUBJECT, body)
        except Exception as notify_error:
            logger.warning(
                f"[{order.id}] Failed to send approval email to {cart.user.email}: "
                f"{notify_error}",
                exc_info=True,
            )
