"""Collaborator doubles for CheckoutService tests."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from checkout.application.interfaces import INotificationService, IPaymentGateway, PaymentResult
from checkout.application.services import CheckoutService
from checkout.domain.repositories import OrderRepository


@pytest.fixture
def gateway():
    """Gateway stub approving every charge."""
    gateway = MagicMock(spec=IPaymentGateway)
    gateway.charge = AsyncMock(return_value=PaymentResult(success=True))
    return gateway


@pytest.fixture
def repository():
    """Repository stub; tests set ``save.return_value`` to the persisted order."""
    repository = MagicMock(spec=OrderRepository)
    repository.save = AsyncMock()
    return repository


@pytest.fixture
def notifier():
    notifier = MagicMock(spec=INotificationService)
    notifier.send_email = AsyncMock(return_value=None)
    return notifier


@pytest.fixture
def checkout_service(gateway, repository, notifier):
    return CheckoutService(gateway=gateway, repository=repository, notifier=notifier)
