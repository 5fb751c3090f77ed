"""
Order entity.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- fastapi
"""
from dataclasses import dataclass
from decimal import Decimal

from ..enums import OrderStatus
from .cart import Cart


@dataclass(frozen=True)
class Order:
    """
    Persisted record of a completed, charged purchase.

    Only an ``OrderRepository`` creates orders: ``id`` and ``status``
    are assigned by the store, ``total_final`` is the charged amount.
    """
    id: str
    cart: Cart
    total_final: Decimal
    status: OrderStatus = OrderStatus.PROCESSED

    def __post_init__(self):
        if not isinstance(self.total_final, Decimal):
            object.__setattr__(self, 'total_final', Decimal(str(self.total_final)))
        if self.total_final < 0:
            raise ValueError(f"Order total must be >= 0, got: {self.total_final}")
        if not isinstance(self.status, OrderStatus):
            object.__setattr__(self, 'status', OrderStatus(self.status))

    @property
    def user_email(self) -> str:
        return self.cart.user.email
