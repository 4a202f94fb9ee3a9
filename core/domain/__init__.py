"""Domain layer - pure domain models and interfaces."""

from .entities import NewOrder, NewOrderLine, Order, OrderItem, OrderStatus, Product, Service
from .exceptions import (
    DuplicateProductsError,
    OrderRuleViolation,
    OrderServiceError,
    ProductsNotFoundError,
    ReferenceDataMissingError,
)
from .repositories import OrderRepository
from .value_objects import ExecutionID, MonthlyProfit

__all__ = [
    "DuplicateProductsError",
    "ExecutionID",
    "MonthlyProfit",
    "NewOrder",
    "NewOrderLine",
    "Order",
    "OrderItem",
    "OrderRepository",
    "OrderRuleViolation",
    "OrderServiceError",
    "OrderStatus",
    "Product",
    "ProductsNotFoundError",
    "ReferenceDataMissingError",
    "Service",
]
