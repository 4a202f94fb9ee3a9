"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List
from uuid import UUID


CREATED_STATUS = "Created"
COMPLETED_STATUS = "Completed"


@dataclass(frozen=True)
class Service:
    """Service a product belongs to (reference data)."""
    service_id: UUID
    name: str


@dataclass(frozen=True)
class Product:
    """Sellable product with unit cost and unit price (reference data)."""
    product_id: UUID
    name: str
    unit_cost: Decimal
    unit_price: Decimal
    service: Service


@dataclass(frozen=True)
class OrderStatus:
    """Named lifecycle stage of an order (reference data)."""
    status_id: UUID
    name: str

    def matches(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.lower() == name.lower()


@dataclass
class OrderItem:
    """Individual line item within an order."""
    item_id: UUID
    order_id: UUID
    product: Product
    quantity: int

    @property
    def service(self) -> Service:
        return self.product.service

    @property
    def total_cost(self) -> Decimal:
        return self.product.unit_cost * self.quantity

    @property
    def total_price(self) -> Decimal:
        return self.product.unit_price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    Totals are always derived from the items, they are never stored.
    """
    order_id: UUID
    reseller_id: UUID
    customer_id: UUID
    status: OrderStatus
    created_date: datetime
    items: List[OrderItem] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def total_cost(self) -> Decimal:
        return sum((item.total_cost for item in self.items), Decimal("0"))

    @property
    def total_price(self) -> Decimal:
        return sum((item.total_price for item in self.items), Decimal("0"))

    @property
    def profit(self) -> Decimal:
        return self.total_price - self.total_cost

    def has_status(self, name: str) -> bool:
        return self.status.matches(name)


@dataclass(frozen=True)
class NewOrderLine:
    """One requested product and quantity."""
    product_id: UUID
    quantity: int

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError(
                f"Quantity must be greater than 0, got: {self.quantity}"
            )


@dataclass(frozen=True)
class NewOrder:
    """Command describing an order to be created."""
    reseller_id: UUID
    customer_id: UUID
    lines: List[NewOrderLine]

    def __post_init__(self):
        if not self.lines:
            raise ValueError("At least one order item is required")

    @property
    def product_ids(self) -> List[UUID]:
        return [line.product_id for line in self.lines]

    def duplicate_product_ids(self) -> List[UUID]:
        """Product ids requested more than once, in first-seen order."""
        seen = set()
        duplicates: List[UUID] = []
        for product_id in self.product_ids:
            if product_id in seen and product_id not in duplicates:
                duplicates.append(product_id)
            seen.add(product_id)
        return duplicates
