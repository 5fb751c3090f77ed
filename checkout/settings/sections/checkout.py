from decimal import Decimal
from typing import Optional

from pydantic import Field

from checkout.settings.base import CheckoutBaseSettings


class CheckoutSettings(CheckoutBaseSettings):
    """
    Checkout settings.
    Loaded from environment / .env file with exact variable name matching.
    """

    env: str = Field(default="development", alias="CHECKOUT_ENV")
    log_level: str = Field(default="INFO", alias="CHECKOUT_LOG_LEVEL")
    order_id_prefix: str = Field(default="ORD", alias="CHECKOUT_ORDER_ID_PREFIX")
    sender_email: str = Field(default="no-reply@checkout.local", alias="CHECKOUT_SENDER_EMAIL")


class PaymentGatewaySettings(CheckoutBaseSettings):
    """
    Mock payment gateway settings.
    Controls whether the in-memory gateway approves charges.
    """

    approve: bool = Field(default=True, alias="CHECKOUT_GATEWAY_APPROVE")
    max_amount: Optional[Decimal] = Field(default=None, alias="CHECKOUT_GATEWAY_MAX_AMOUNT")
