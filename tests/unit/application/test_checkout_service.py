"""Tests for CheckoutService.process_order."""
import asyncio
import logging
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, call

import pytest

from checkout.application.interfaces import PaymentResult
from checkout.application.services import APPROVAL_SUBJECT, CheckoutService
from checkout.domain.entities import Item, Order
from checkout.domain.enums import OrderStatus
from tests.helpers.builders import CartBuilder, UserMother


@pytest.mark.asyncio
async def test_declined_payment_returns_none_and_commits_nothing(
    checkout_service, gateway, repository, notifier
):
    """Decline is a normal outcome: no save, no email."""
    cart = CartBuilder().with_total(Decimal("100.0")).build()
    gateway.charge.return_value = PaymentResult(success=False)

    order = await checkout_service.process_order(cart, "1234-5678-9012-3456")

    assert order is None
    gateway.charge.assert_awaited_once_with(Decimal("100.0"), "1234-5678-9012-3456")
    repository.save.assert_not_called()
    notifier.send_email.assert_not_called()


@pytest.mark.asyncio
async def test_standard_customer_checkout(checkout_service, gateway, repository, notifier):
    """Standard customer is charged the full subtotal and emailed once."""
    cart = CartBuilder().with_user(UserMother.standard()).with_total(Decimal("150.0")).build()
    saved = Order(id="PED-123", cart=cart, total_final=Decimal("150.0"), status=OrderStatus.PROCESSED)
    repository.save.return_value = saved

    order = await checkout_service.process_order(cart, "1234-5678-9012-3456")

    assert order is saved
    assert order.id == "PED-123"
    assert order.status is OrderStatus.PROCESSED
    assert order.total_final == Decimal("150.0")

    gateway.charge.assert_awaited_once_with(Decimal("150.0"), "1234-5678-9012-3456")
    repository.save.assert_awaited_once_with(cart, Decimal("150.0"))
    notifier.send_email.assert_awaited_once_with(
        "john@email.com",
        "Your Order was Approved!",
        "Order PED-123 for $150",
    )


@pytest.mark.asyncio
async def test_premium_customer_gets_discount(checkout_service, gateway, repository, notifier):
    """Premium customer is charged 10% less than the subtotal."""
    cart = (
        CartBuilder()
        .with_user(UserMother.premium())
        .with_items([Item("Notebook", Decimal("150.0")), Item("Mouse", Decimal("50.0"))])
        .build()
    )
    repository.save.return_value = Order(id="PED-456", cart=cart, total_final=Decimal("180.0"))

    order = await checkout_service.process_order(cart, "9876-5432-1098-7654")

    assert order.id == "PED-456"
    assert order.total_final == Decimal("180.0")
    gateway.charge.assert_awaited_once_with(Decimal("180.0"), "9876-5432-1098-7654")
    repository.save.assert_awaited_once_with(cart, Decimal("180.0"))
    notifier.send_email.assert_awaited_once_with(
        "premium@email.com",
        APPROVAL_SUBJECT,
        "Order PED-456 for $180",
    )


@pytest.mark.asyncio
async def test_empty_cart_charges_zero(checkout_service, gateway, repository):
    """Empty cart is not special-cased."""
    cart = CartBuilder().empty().build()
    repository.save.return_value = Order(id="PED-789", cart=cart, total_final=Decimal("0"))

    order = await checkout_service.process_order(cart, "1111-2222-3333-4444")

    assert order is not None
    assert order.total_final == 0
    gateway.charge.assert_awaited_once_with(Decimal("0"), "1111-2222-3333-4444")
    repository.save.assert_awaited_once_with(cart, Decimal("0"))


@pytest.mark.asyncio
async def test_email_failure_does_not_block_checkout(
    checkout_service, repository, notifier, caplog
):
    """A failing notifier is tried once and the persisted order is still returned."""
    cart = CartBuilder().with_total(Decimal("100.0")).build()
    saved = Order(id="PED-999", cart=cart, total_final=Decimal("100.0"))
    repository.save.return_value = saved
    notifier.send_email.side_effect = ConnectionError("Mail server unavailable")

    with caplog.at_level(logging.WARNING, logger="checkout.application.services.checkout_service"):
        order = await checkout_service.process_order(cart, "5555-6666-7777-8888")

    assert order is saved
    assert order.id == "PED-999"
    assert order.status is OrderStatus.PROCESSED
    notifier.send_email.assert_awaited_once()
    assert "Failed to send approval email" in caplog.text
    assert "Mail server unavailable" in caplog.text


@pytest.mark.asyncio
async def test_persistence_failure_propagates_and_skips_email(
    checkout_service, gateway, repository, notifier, caplog
):
    """Repository faults surface to the caller; no email is attempted."""
    cart = CartBuilder().build()
    repository.save.side_effect = RuntimeError("storage unavailable")

    with caplog.at_level(logging.ERROR, logger="checkout.application.services.checkout_service"):
        with pytest.raises(RuntimeError, match="storage unavailable"):
            await checkout_service.process_order(cart, "1234-5678-9012-3456")

    gateway.charge.assert_awaited_once()
    notifier.send_email.assert_not_called()

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "Order persistence failed after successful charge" in errors[0].getMessage()
    assert errors[0].exc_info is not None


@pytest.mark.asyncio
async def test_gateway_fault_propagates(checkout_service, gateway, repository, notifier):
    """Gateway exceptions are faults, not declines."""
    gateway.charge.side_effect = TimeoutError("gateway timeout")

    with pytest.raises(TimeoutError):
        await checkout_service.process_order(CartBuilder().build(), "1234-5678-9012-3456")

    repository.save.assert_not_called()
    notifier.send_email.assert_not_called()


@pytest.mark.asyncio
async def test_repeated_checkouts_charge_identical_amounts(checkout_service, gateway, repository):
    """Same cart contents always charge the same amount."""
    cart = CartBuilder().with_user(UserMother.premium()).with_total(Decimal("59.90")).build()
    repository.save.return_value = Order(id="PED-1", cart=cart, total_final=Decimal("53.91"))

    for _ in range(3):
        await checkout_service.process_order(cart, "tok")

    amounts = {call.args[0] for call in gateway.charge.await_args_list}
    assert gateway.charge.await_count == 3
    assert amounts == {Decimal("53.91")}


@pytest.mark.asyncio
async def test_order_returned_unmodified(checkout_service, repository):
    """The repository's order is authoritative; the service does not rebuild it."""
    cart = CartBuilder().build()
    saved = Order(id="STORE-42", cart=cart, total_final=Decimal("100.0"))
    repository.save.return_value = saved

    order = await checkout_service.process_order(cart, "tok")

    assert order is saved


@pytest.mark.asyncio
async def test_concurrent_checkouts_are_independent(gateway, notifier):
    """Concurrent calls share no state beyond the injected collaborators."""
    repository = AsyncMock()

    async def save(cart, total_final):
        await asyncio.sleep(0)
        return Order(id=f"ORD-{cart.user.id}", cart=cart, total_final=total_final)

    repository.save.side_effect = save
    service = CheckoutService(gateway=gateway, repository=repository, notifier=notifier)

    standard_cart = CartBuilder().with_user(UserMother.standard()).with_total(Decimal("200")).build()
    premium_cart = CartBuilder().with_user(UserMother.premium()).with_total(Decimal("200")).build()

    standard_order, premium_order = await asyncio.gather(
        service.process_order(standard_cart, "tok-1"),
        service.process_order(premium_cart, "tok-2"),
    )

    assert standard_order.total_final == Decimal("200")
    assert premium_order.total_final == Decimal("180")
    assert gateway.charge.await_count == 2
    assert notifier.send_email.await_count == 2


@pytest.mark.asyncio
async def test_steps_run_in_order_charge_save_notify(checkout_service, gateway, repository, notifier):
    """Charge completes before save, save completes before the email."""
    cart = CartBuilder().with_total(Decimal("150.0")).build()
    repository.save.return_value = Order(id="PED-321", cart=cart, total_final=Decimal("150.0"))

    parent = MagicMock()
    parent.attach_mock(gateway.charge, "charge")
    parent.attach_mock(repository.save, "save")
    parent.attach_mock(notifier.send_email, "send_email")

    await checkout_service.process_order(cart, "tok-1")

    assert parent.mock_calls == [
        call.charge(Decimal("150.0"), "tok-1"),
        call.save(cart, Decimal("150.0")),
        call.send_email("john@email.com", APPROVAL_SUBJECT, "Order PED-321 for $150"),
    ]
