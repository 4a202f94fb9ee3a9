"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderItemMapper, OrderMapper, OrderStatusMapper, ProductMapper
from .models import (
    Base,
    OrderItemModel,
    OrderModel,
    OrderStatusModel,
    ProductModel,
    ServiceModel,
)
from .repositories import SqlAlchemyOrderRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "OrderStatusMapper",
    "OrderStatusModel",
    "ProductMapper",
    "ProductModel",
    "ServiceModel",
    "SqlAlchemyOrderRepository",
    "UnitOfWork",
]
