"""
Mock Order Repository Implementation.

This is an in-memory implementation for testing and demos.
"""
from decimal import Decimal
from itertools import count
from typing import Dict, List, Optional
import logging

from checkout.domain.entities import Cart, Order
from checkout.domain.enums import OrderStatus
from checkout.domain.repositories import OrderRepository


logger = logging.getLogger(__name__)


class MockOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Assigns ids of the form ``{prefix}-000001`` from a per-instance
    counter and stores orders in a dictionary.
    """

    def __init__(self, id_prefix: str = "ORD"):
        """Initialize empty storage."""
        self.id_prefix = id_prefix
        self._storage: Dict[str, Order] = {}
        self._sequence = count(1)
        logger.info("MockOrderRepository initialized (in-memory storage)")

    async def save(self, cart: Cart, total_final: Decimal) -> Order:
        """
        Create and store an order for a charged cart.

        Args:
            cart: Charged cart
            total_final: Charged amount

        Returns:
            Persisted Order with PROCESSED status
        """
        order = Order(
            id=f"{self.id_prefix}-{next(self._sequence):06d}",
            cart=cart,
            total_final=total_final,
            status=OrderStatus.PROCESSED,
        )
        self._storage[order.id] = order
        logger.info(
            f"Order saved to mock repository: {order.id} "
            f"(status: {order.status.value}, total: {order.total_final})"
        )
        return order

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """
        Get order by ID from in-memory storage.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order if found, None otherwise
        """
        order = self._storage.get(order_id)

        if order:
            logger.info(f"Order found in mock repository: {order_id}")
        else:
            logger.info(f"Order not found in mock repository: {order_id}")

        return order

    async def find_all(self, limit: int = 100) -> List[Order]:
        """
        Get all orders with pagination.

        Args:
            limit: Maximum number of orders to return

        Returns:
            List of orders (up to limit), oldest first
        """
        orders = list(self._storage.values())[:limit]
        logger.info(f"Found {len(orders)} order(s) in mock repository (limit: {limit})")
        return orders

    async def count(self) -> int:
        return len(self._storage)

    def get_all(self) -> List[Order]:
        """Get all orders (for demo/testing)."""
        return list(self._storage.values())

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        self._storage.clear()
        logger.info("Mock repository cleared")
