"""Domain layer - pure domain models and interfaces."""

from .entities import Cart, Item, Order, User
from .enums import OrderStatus, UserTier
from .repositories import OrderRepository

__all__ = [
    "Cart",
    "Item",
    "Order",
    "OrderRepository",
    "OrderStatus",
    "User",
    "UserTier",
]
