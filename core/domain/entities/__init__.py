"""Domain entities."""

from .order import (
    COMPLETED_STATUS,
    CREATED_STATUS,
    NewOrder,
    NewOrderLine,
    Order,
    OrderItem,
    OrderStatus,
    Product,
    Service,
)

__all__ = [
    "COMPLETED_STATUS",
    "CREATED_STATUS",
    "NewOrder",
    "NewOrderLine",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Product",
    "Service",
]
