from checkout.settings.sections.checkout import CheckoutSettings, PaymentGatewaySettings

__all__ = ["CheckoutSettings", "PaymentGatewaySettings"]
