"""User entity (read-only to checkout)."""
from dataclasses import dataclass

from ..enums import UserTier


@dataclass(frozen=True)
class User:
    """
    Customer placing the order.

    Created by account management; checkout only reads it.
    A raw string tier is coerced to ``UserTier`` so unknown tiers
    are rejected here instead of silently losing their discount.
    """
    id: int
    name: str
    email: str
    tier: UserTier = UserTier.STANDARD

    def __post_init__(self):
        if not isinstance(self.tier, UserTier):
            try:
                object.__setattr__(self, 'tier', UserTier(self.tier))
            except ValueError:
                raise ValueError(f"Unknown user tier: {self.tier!r}") from None

    @property
    def is_premium(self) -> bool:
        return self.tier is UserTier.PREMIUM
