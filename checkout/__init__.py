"""Checkout orchestrator: charge, persist and notify for e-commerce carts."""

__version__ = "1.0.0"
