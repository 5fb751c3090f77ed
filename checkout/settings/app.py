# checkout/settings/app.py
from functools import lru_cache

from checkout.settings.sections import CheckoutSettings, PaymentGatewaySettings


class AppSettings:
    """
    Central application settings aggregator.
    Settings are loaded lazily inside __init__
    to prevent eager evaluation at import time.
    """

    def __init__(self):
        self.checkout = CheckoutSettings()
        self.gateway = PaymentGatewaySettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
