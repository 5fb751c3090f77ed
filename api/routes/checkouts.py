"""
Checkout endpoint.

Charges a cart, persists the order and emails the customer.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from checkout.application.dtos import CheckoutRequest, OrderDTO
from checkout.application.services import CheckoutService
from api.dependencies import get_checkout_service


router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=OrderDTO,
    summary="Check out a cart",
    description="Charge the cart total (tier discount applied), persist the order and send the approval email",
    responses={402: {"description": "Payment declined"}},
)
async def checkout_cart(
    request: CheckoutRequest,
    service: CheckoutService = Depends(get_checkout_service),
):
    """
    Check out a cart.

    **Returns:**
    - 201 with the persisted order
    - 402 when the payment gateway declines the charge
    """
    order = await service.process_order(request.to_cart(), request.payment_token)

    if order is None:
        raise HTTPException(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            detail="Payment declined",
        )

    return OrderDTO.from_order(order)
