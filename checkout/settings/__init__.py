# Settings package
from checkout.settings.app import AppSettings, get_app_settings
from checkout.settings.sections import CheckoutSettings, PaymentGatewaySettings

__all__ = ["get_app_settings", "AppSettings", "CheckoutSettings", "PaymentGatewaySettings"]
