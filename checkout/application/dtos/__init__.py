"""Application DTOs."""

from .checkout_dto import CheckoutRequest, ItemDTO, OrderDTO, OrderListDTO, UserDTO

__all__ = ["CheckoutRequest", "ItemDTO", "OrderDTO", "OrderListDTO", "UserDTO"]
