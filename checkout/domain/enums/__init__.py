"""Domain enums."""

from .order_status import OrderStatus
from .user_tier import UserTier

__all__ = ["OrderStatus", "UserTier"]
