"""
Checkout pricing rules.

Pure functions: the charged total depends only on the cart items
and the user tier.
"""
import logging
from decimal import MAX_PREC, Decimal, localcontext
from typing import Iterable

from .entities import Cart, Item
from .enums import UserTier

logger = logging.getLogger(__name__)

PREMIUM_DISCOUNT_FACTOR = Decimal("0.90")
STANDARD_DISCOUNT_FACTOR = Decimal("1.00")


def discount_factor(tier: UserTier) -> Decimal:
    """Multiplier applied to the subtotal before charging."""
    if tier is UserTier.PREMIUM:
        return PREMIUM_DISCOUNT_FACTOR
    return STANDARD_DISCOUNT_FACTOR


def calculate_subtotal(items: Iterable[Item]) -> Decimal:
    # Sums of finite decimals are exact; never round to the default 28 digits.
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return sum((item.price for item in items), Decimal("0"))


def calculate_total(cart: Cart) -> Decimal:
    """
    Final chargeable amount for a cart.

    Args:
        cart: Cart to price

    Returns:
        Subtotal of all items reduced by the user's tier discount
    """
    subtotal = calculate_subtotal(cart.items)
    factor = discount_factor(cart.user.tier)
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        total = subtotal * factor
    logger.debug(
        f"Priced cart for user {cart.user.id}: subtotal={subtotal} "
        f"tier={cart.user.tier.value} factor={factor} total={total}"
    )
    return total


def format_amount(amount: Decimal) -> str:
    """
    Render an amount without trailing zeros or exponent notation.

    Decimal("180.000") -> "180", Decimal("99.90") -> "99.9".
    """
    if amount == 0:
        return "0"
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return f"{amount.normalize():f}"
