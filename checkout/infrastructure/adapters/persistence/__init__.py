"""Persistence adapters."""

from .mock_order_repository import MockOrderRepository

__all__ = ["MockOrderRepository"]
