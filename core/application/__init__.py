"""Application layer - services, interfaces, and DTOs."""

from .dtos import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    MonthlyProfitDTO,
    OrderDetailDTO,
    OrderItemDTO,
    OrderStatusUpdatedDTO,
    OrderSummaryDTO,
    UpdateOrderStatusRequest,
)
from .interfaces import IOrderService
from .services import OrderApplicationService, summarize_monthly_profit

__all__ = [
    # DTOs
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "MonthlyProfitDTO",
    "OrderDetailDTO",
    "OrderItemDTO",
    "OrderStatusUpdatedDTO",
    "OrderSummaryDTO",
    "UpdateOrderStatusRequest",
    # Services
    "OrderApplicationService",
    "summarize_monthly_profit",
    # Interfaces
    "IOrderService",
]
