"""Application DTOs."""

from .order_dto import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    MonthlyProfitDTO,
    OrderDetailDTO,
    OrderItemDTO,
    OrderStatusUpdatedDTO,
    OrderSummaryDTO,
    UpdateOrderStatusRequest,
)

__all__ = [
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "MonthlyProfitDTO",
    "OrderDetailDTO",
    "OrderItemDTO",
    "OrderStatusUpdatedDTO",
    "OrderSummaryDTO",
    "UpdateOrderStatusRequest",
]
