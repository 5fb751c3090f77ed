"""
Cart and line items.

CRITICAL: Prices are Decimal, never float!
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from .user import User


@dataclass(frozen=True)
class Item:
    """Immutable priced item."""
    name: str
    price: Decimal

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, 'price', Decimal(str(self.price)))

        if self.price < 0:
            raise ValueError(
                f"Item price must be >= 0, got: {self.price} ({self.name})"
            )


@dataclass(frozen=True)
class Cart:
    """
    Unsaved collection of items for a user.

    Built by the caller before checkout; checkout never mutates it.
    """
    user: User
    items: Tuple[Item, ...] = ()

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, 'items', tuple(self.items))

    def is_empty(self) -> bool:
        return not self.items
