"""
Orders lookup endpoints.

Read-only access to orders persisted by checkout.
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query

from checkout.application.dtos import OrderDTO, OrderListDTO
from checkout.domain.repositories import OrderRepository
from api.dependencies import get_order_repository


router = APIRouter()


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=OrderListDTO,
    summary="List all orders",
    description="Get list of all orders in the system"
)
async def list_orders(
    limit: int = Query(default=100, ge=1, le=1000, description="Maximum number of orders to return"),
    repository: OrderRepository = Depends(get_order_repository)
):
    """
    List orders.

    **Query Parameters:**
    - `limit`: Maximum orders to return (1-1000, default: 100)
    """
    orders = await repository.find_all(limit=limit)
    total = await repository.count()
    return OrderListDTO(
        orders=[OrderDTO.from_order(order) for order in orders],
        total=total,
        count=len(orders),
    )


@router.get(
    "/{order_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrderDTO,
    summary="Get order by ID",
    description="Get detailed information about a specific order"
)
async def get_order(
    order_id: str,
    repository: OrderRepository = Depends(get_order_repository)
):
    """Get order by ID."""
    order = await repository.find_by_id(order_id)

    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Order not found: {order_id}"
        )

    return OrderDTO.from_order(order)
