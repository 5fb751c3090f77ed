"""Application DTOs for checkout operations."""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from checkout.domain.entities import Cart, Item, Order, User
from checkout.domain.enums import OrderStatus, UserTier


class UserDTO(BaseModel):
    """DTO for the customer checking out."""

    id: int = Field(..., description="User ID")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address for the approval notice")
    tier: UserTier = Field(default=UserTier.STANDARD, description="Customer tier")

    model_config = {"frozen": True}


class ItemDTO(BaseModel):
    """DTO for a cart item."""

    name: str = Field(..., description="Item name")
    price: Decimal = Field(..., ge=0, description="Item price")

    model_config = {"frozen": True}


class CheckoutRequest(BaseModel):
    """Request DTO for checking out a cart."""

    user: UserDTO = Field(..., description="Customer")
    items: List[ItemDTO] = Field(default_factory=list, description="Cart items, in order")
    payment_token: str = Field(..., min_length=1, description="Payment token")

    model_config = {"frozen": True}

    def to_cart(self) -> Cart:
        """Transform request into a Cart domain entity."""
        user = User(
            id=self.user.id,
            name=self.user.name,
            email=self.user.email,
            tier=self.user.tier,
        )
        return Cart(
            user=user,
            items=[Item(name=item.name, price=item.price) for item in self.items],
        )


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order ID")
    user_id: int = Field(..., description="User ID")
    email: str = Field(..., description="Customer email")
    items: List[ItemDTO] = Field(default_factory=list, description="Ordered items")
    total_final: Decimal = Field(..., ge=0, description="Charged amount")
    status: OrderStatus = Field(..., description="Order status")

    model_config = {"frozen": True}

    @classmethod
    def from_order(cls, order: Order) -> "OrderDTO":
        """Transform Order domain entity to OrderDTO."""
        return cls(
            id=order.id,
            user_id=order.cart.user.id,
            email=order.cart.user.email,
            items=[ItemDTO(name=item.name, price=item.price) for item in order.cart.items],
            total_final=order.total_final,
            status=order.status,
        )


class OrderListDTO(BaseModel):
    """DTO for listing orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="List of orders")
    total: int = Field(..., ge=0, description="Total count")
    count: int = Field(..., ge=0, description="Returned count")

    model_config = {"frozen": True}
