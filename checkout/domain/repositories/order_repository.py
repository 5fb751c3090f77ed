"""Repository interface for Order persistence."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from ..entities import Cart, Order


class OrderRepository(ABC):
    """Abstract repository for Order persistence."""

    @abstractmethod
    async def save(self, cart: Cart, total_final: Decimal) -> Order:
        """Persist a charged cart as a new order.

        Args:
            cart: Cart that was charged
            total_final: Amount that was charged

        Returns:
            The canonical persisted Order with store-assigned id and status
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> List[Order]:
        """List orders with pagination.

        Args:
            limit: Maximum number of orders to return

        Returns:
            List of Order entities
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Total number of stored orders."""
        pass
