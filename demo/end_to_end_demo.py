"""
End-to-End Demo: Cart Checkout

This demonstrates the complete workflow:
1. Price the cart (premium discount)
2. Charge the payment gateway
3. Save to repository
4. Send approval email

Uses mock implementations (no real processor/database/mail server needed).
"""
import asyncio
from decimal import Decimal

from checkout.application.services import CheckoutService
from checkout.domain.entities import Cart, Item, User
from checkout.domain.enums import UserTier
from checkout.infrastructure.adapters.notifications import MockNotificationService
from checkout.infrastructure.adapters.payments import MockPaymentGateway
from checkout.infrastructure.adapters.persistence import MockOrderRepository
from checkout.infrastructure.logging import configure_logging, get_logger

logger = get_logger("demo.end_to_end")


def _print_result(title: str, order) -> None:
    print("\n" + "=" * 80)
    print(f"DEMO: {title}")
    print("=" * 80)
    if order is None:
        print("Payment declined - no order created, no email sent")
        return
    print(f"Order ID:    {order.id}")
    print(f"Status:      {order.status.value}")
    print(f"Customer:    {order.cart.user.name} <{order.cart.user.email}>")
    print(f"Items:       {len(order.cart.items)}")
    print(f"Total final: {order.total_final}")


async def main():
    """Run checkout scenarios against the mock collaborators."""
    standard = User(id=1, name="John Smith", email="john@example.com", tier=UserTier.STANDARD)
    premium = User(id=2, name="Mary Premium", email="premium@example.com", tier=UserTier.PREMIUM)

    repository = MockOrderRepository()
    notifier = MockNotificationService()
    service = CheckoutService(
        gateway=MockPaymentGateway(),
        repository=repository,
        notifier=notifier,
    )

    order = await service.process_order(
        Cart(user=standard, items=[Item("Keyboard", Decimal("150.00"))]),
        "1234-5678-9012-3456",
    )
    _print_result("Standard customer", order)

    order = await service.process_order(
        Cart(user=premium, items=[Item("Notebook", Decimal("150.00")), Item("Mouse", Decimal("50.00"))]),
        "9876-5432-1098-7654",
    )
    _print_result("Premium customer (10% off)", order)

    order = await service.process_order(Cart(user=standard), "1111-2222-3333-4444")
    _print_result("Empty cart", order)

    declining = CheckoutService(
        gateway=MockPaymentGateway(approve=False),
        repository=repository,
        notifier=notifier,
    )
    order = await declining.process_order(
        Cart(user=standard, items=[Item("Monitor", Decimal("200.00"))]),
        "0000-0000-0000-0000",
    )
    _print_result("Declined payment", order)

    flaky_mail = CheckoutService(
        gateway=MockPaymentGateway(),
        repository=repository,
        notifier=MockNotificationService(fail_with=ConnectionError("Mail server unavailable")),
    )
    order = await flaky_mail.process_order(
        Cart(user=premium, items=[Item("Headset", Decimal("99.90"))]),
        "5555-6666-7777-8888",
    )
    _print_result("Email server down (order still processed)", order)

    print("\n" + "=" * 80)
    print(f"Orders stored: {await repository.count()}")
    print(f"Emails sent:   {len(notifier.get_emails())}")
    for email in notifier.get_emails():
        print(f"  -> {email['to']}: {email['subject']} | {email['body']}")
    logger.info("Demo finished")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
