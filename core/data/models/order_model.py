"""SQLAlchemy ORM models for Order aggregate and its reference data.

Identifiers are stored as 16-byte binary UUIDs.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, LargeBinary, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ServiceModel(Base):
    """SQLAlchemy ORM model for order_service table."""

    __tablename__ = "order_service"

    id = Column(LargeBinary(16), primary_key=True)
    name = Column(String(100), nullable=False)

    products = relationship("ProductModel", back_populates="service")

    def __repr__(self):
        return f"<ServiceModel(name={self.name})>"


class ProductModel(Base):
    """SQLAlchemy ORM model for order_product table."""

    __tablename__ = "order_product"

    id = Column(LargeBinary(16), primary_key=True)
    service_id = Column(LargeBinary(16), ForeignKey("order_service.id"), nullable=False)
    name = Column(String(255), nullable=False)
    unit_cost = Column(Numeric(18, 4), nullable=False)
    unit_price = Column(Numeric(18, 4), nullable=False)

    service = relationship("ServiceModel", back_populates="products")

    def __repr__(self):
        return f"<ProductModel(name={self.name}, unit_cost={self.unit_cost}, unit_price={self.unit_price})>"


class OrderStatusModel(Base):
    """SQLAlchemy ORM model for order_status table."""

    __tablename__ = "order_status"

    id = Column(LargeBinary(16), primary_key=True)
    name = Column(String(20), nullable=False, unique=True)

    def __repr__(self):
        return f"<OrderStatusModel(name={self.name})>"


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(LargeBinary(16), primary_key=True)
    reseller_id = Column(LargeBinary(16), nullable=False)
    customer_id = Column(LargeBinary(16), nullable=False)
    status_id = Column(LargeBinary(16), ForeignKey("order_status.id"), nullable=False)
    created_date = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    status = relationship("OrderStatusModel")

    # Relationship to items
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )

    __table_args__ = (
        Index("ix_orders_status_created", "status_id", "created_date"),
        Index("ix_orders_created_date", "created_date"),
    )

    def __repr__(self):
        return f"<OrderModel(created_date={self.created_date})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(LargeBinary(16), primary_key=True)
    order_id = Column(LargeBinary(16), ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(LargeBinary(16), ForeignKey("order_product.id"), nullable=False)
    service_id = Column(LargeBinary(16), ForeignKey("order_service.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    # Insertion order within the owning order
    position = Column(Integer, nullable=False, default=0)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")
    product = relationship("ProductModel")
    service = relationship("ServiceModel")

    def __repr__(self):
        return f"<OrderItemModel(quantity={self.quantity})>"
