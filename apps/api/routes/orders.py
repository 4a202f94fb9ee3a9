"""
Orders management endpoints.

Provides CRUD operations for orders and the monthly profit report.
"""
from typing import List
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from core.application.dtos.order_dto import (
    NIL_UUID,
    CreateOrderRequest,
    MonthlyProfitDTO,
    OrderDetailDTO,
    OrderStatusUpdatedDTO,
    OrderSummaryDTO,
    UpdateOrderStatusRequest,
)
from core.application.interfaces import IOrderService
from core.domain.exceptions import OrderServiceError
from apps.api.deps import get_order_service


logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["Orders"])


def _require_order_id(order_id: UUID) -> UUID:
    """Reject the nil UUID as an order identifier."""
    if order_id == NIL_UUID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid order ID",
        )
    return order_id


# =============================================================================
# LIST ORDERS
# =============================================================================

@router.get(
    "",
    response_model=List[OrderSummaryDTO],
    summary="List all orders",
    description="Get every order, newest first",
)
async def list_orders(
    service: IOrderService = Depends(get_order_service),
) -> List[OrderSummaryDTO]:
    return await service.list_orders()


# =============================================================================
# MONTHLY PROFIT
# =============================================================================

@router.get(
    "/profit/monthly",
    response_model=List[MonthlyProfitDTO],
    summary="Monthly profit",
    description="Total profit by calendar month for all completed orders",
)
async def get_monthly_profit(
    service: IOrderService = Depends(get_order_service),
) -> List[MonthlyProfitDTO]:
    """
    Calculate profit by month.

    **Returns:**
    - One entry per month with completed orders, oldest month first
    """
    try:
        return await service.calculate_monthly_profit()
    except Exception as e:
        logger.error(f"Monthly profit calculation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while calculating monthly profit",
        )


# =============================================================================
# LIST ORDERS BY STATUS
# =============================================================================

@router.get(
    "/status/{status_name}",
    response_model=List[OrderSummaryDTO],
    summary="List orders by status",
    description="Get orders whose status matches the name (case-insensitive)",
)
async def list_orders_by_status(
    status_name: str,
    service: IOrderService = Depends(get_order_service),
) -> List[OrderSummaryDTO]:
    if not status_name.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Status name is required",
        )
    return await service.list_orders_by_status(status_name)


# =============================================================================
# GET ORDER BY ID
# =============================================================================

@router.get(
    "/{order_id}",
    response_model=OrderDetailDTO,
    summary="Get order by ID",
    description="Get detailed information about a specific order",
)
async def get_order(
    order_id: UUID,
    service: IOrderService = Depends(get_order_service),
) -> OrderDetailDTO:
    """
    Get order by ID.

    **Parameters:**
    - `order_id`: Order UUID

    **Returns:**
    - Order details including items and totals
    """
    order = await service.get_order(_require_order_id(order_id))
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Order {order_id} not found",
        )
    return order


# =============================================================================
# UPDATE ORDER STATUS
# =============================================================================

@router.put(
    "/{order_id}/status",
    response_model=OrderStatusUpdatedDTO,
    summary="Update order status",
)
async def update_order_status(
    order_id: UUID,
    request: UpdateOrderStatusRequest,
    service: IOrderService = Depends(get_order_service),
) -> OrderStatusUpdatedDTO:
    updated = await service.update_order_status(
        _require_order_id(order_id), request.status_name
    )
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Order not found or invalid status: '{request.status_name}'",
        )

    return OrderStatusUpdatedDTO(
        message="Order status updated successfully",
        order_id=order_id,
        new_status=request.status_name,
    )


# =============================================================================
# CREATE ORDER
# =============================================================================

@router.post(
    "",
    response_model=OrderDetailDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create order",
)
async def create_order(
    body: CreateOrderRequest,
    request: Request,
    response: Response,
    service: IOrderService = Depends(get_order_service),
) -> OrderDetailDTO:
    """Create a new order.

    Args:
        body: CreateOrderRequest DTO
        request: Incoming request (used to build the Location header)
        response: Outgoing response
        service: Order workflow service

    Returns:
        OrderDetailDTO with created order details

    Raises:
        HTTPException: If order creation fails unexpectedly
    """
    try:
        order = await service.create_order(body)
    except (OrderServiceError, ValueError):
        # Translated by the application exception handlers
        raise
    except Exception as e:
        logger.error(f"Create order failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while creating the order",
        )

    response.headers["Location"] = str(request.url_for("get_order", order_id=str(order.id)))
    return order
