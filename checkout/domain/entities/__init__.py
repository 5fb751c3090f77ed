"""Domain entities."""

from .cart import Cart, Item
from .order import Order
from .user import User

__all__ = ["Cart", "Item", "Order", "User"]
