"""Pytest configuration and fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_checkout_service, get_order_repository, reset_dependencies
from api.main import app
from checkout.application.services import CheckoutService
from checkout.infrastructure.adapters.notifications import MockNotificationService
from checkout.infrastructure.adapters.payments import MockPaymentGateway
from checkout.infrastructure.adapters.persistence import MockOrderRepository


@pytest.fixture
def gateway() -> MockPaymentGateway:
    return MockPaymentGateway()


@pytest.fixture
def repository() -> MockOrderRepository:
    return MockOrderRepository()


@pytest.fixture
def notifier() -> MockNotificationService:
    return MockNotificationService()


@pytest.fixture
def test_client(gateway, repository, notifier) -> TestClient:
    """Create FastAPI test client wired to fresh in-memory collaborators."""
    service = CheckoutService(gateway=gateway, repository=repository, notifier=notifier)

    app.dependency_overrides[get_checkout_service] = lambda: service
    app.dependency_overrides[get_order_repository] = lambda: repository

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
    reset_dependencies()


@pytest.fixture
def premium_checkout_payload() -> dict:
    return {
        "user": {"id": 2, "name": "Mary Premium", "email": "premium@email.com", "tier": "PREMIUM"},
        "items": [
            {"name": "Notebook", "price": "150.00"},
            {"name": "Mouse", "price": "50.00"},
        ],
        "payment_token": "9876-5432-1098-7654",
    }
