"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

from core.domain.entities.order import Order, OrderItem, OrderStatus, Product, Service

from .models.order_model import (
    OrderItemModel,
    OrderModel,
    OrderStatusModel,
    ProductModel,
    ServiceModel,
)


def uuid_to_bytes(value: UUID) -> bytes:
    """Encode a UUID for storage."""
    return value.bytes


def bytes_to_uuid(value: Optional[bytes]) -> Optional[UUID]:
    """Decode a stored UUID."""
    if value is None:
        return None
    return UUID(bytes=bytes(value))


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    SQLite hands back naive datetimes; they are stored as UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ServiceMapper:
    """Static mapper for Service ↔ ServiceModel transformation."""

    @staticmethod
    def to_domain(model: ServiceModel) -> Service:
        return Service(service_id=bytes_to_uuid(model.id), name=model.name)


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        """Convert ORM model to domain entity.

        Args:
            model: ProductModel instance with its service loaded

        Returns:
            Product domain entity
        """
        return Product(
            product_id=bytes_to_uuid(model.id),
            name=model.name,
            unit_cost=Decimal(str(model.unit_cost)),
            unit_price=Decimal(str(model.unit_price)),
            service=ServiceMapper.to_domain(model.service),
        )


class OrderStatusMapper:
    """Static mapper for OrderStatus ↔ OrderStatusModel transformation."""

    @staticmethod
    def to_domain(model: OrderStatusModel) -> OrderStatus:
        return OrderStatus(status_id=bytes_to_uuid(model.id), name=model.name)


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance with product and service loaded

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            item_id=bytes_to_uuid(model.id),
            order_id=bytes_to_uuid(model.order_id),
            product=ProductMapper.to_domain(model.product),
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(
        item_id: UUID, order_id: UUID, product: ProductModel, quantity: int, position: int
    ) -> OrderItemModel:
        """Build the ORM row for a new order line.

        The service reference is copied from the product.
        """
        return OrderItemModel(
            id=uuid_to_bytes(item_id),
            order_id=uuid_to_bytes(order_id),
            product_id=product.id,
            service_id=product.service_id,
            quantity=quantity,
            position=position,
            product=product,
            service=product.service,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        # Map nested items recursively
        items = [OrderItemMapper.to_domain(item_model) for item_model in model.items]

        return Order(
            order_id=bytes_to_uuid(model.id),
            reseller_id=bytes_to_uuid(model.reseller_id),
            customer_id=bytes_to_uuid(model.customer_id),
            status=OrderStatusMapper.to_domain(model.status),
            created_date=as_utc(model.created_date),
            items=items,
        )

    @staticmethod
    def to_persistence(
        order_id: UUID,
        reseller_id: UUID,
        customer_id: UUID,
        status: OrderStatusModel,
        created_date: datetime,
    ) -> OrderModel:
        """Build the ORM row for a new order (items are attached separately)."""
        return OrderModel(
            id=uuid_to_bytes(order_id),
            reseller_id=uuid_to_bytes(reseller_id),
            customer_id=uuid_to_bytes(customer_id),
            status_id=status.id,
            status=status,
            created_date=created_date,
        )
