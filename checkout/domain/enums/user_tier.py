"""
User Tier Enum.

Customer classification driving discount eligibility.
"""
from enum import Enum


class UserTier(str, Enum):
    """Customer tier values."""

    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"
