"""
Order Status Enum.

Status values assigned by the order repository.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""

    PROCESSED = "PROCESSED"
