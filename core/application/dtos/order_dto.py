"""Application DTOs for Order operations.

JSON field names are camelCase; Python code uses the snake_case field names.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


NIL_UUID = UUID(int=0)

# Largest quantity the order_items.quantity column (32-bit INTEGER) can hold
MAX_QUANTITY = 2**31 - 1

MoneyAmount = Annotated[
    Decimal,
    Field(description="Decimal amount, serialized as a JSON string to keep exact precision"),
]


class CamelModel(BaseModel):
    """Base DTO exposing camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def _reject_nil(value: UUID, field_name: str) -> UUID:
    if value == NIL_UUID:
        raise ValueError(f"{field_name} cannot be empty")
    return value


# =============================================================================
# REQUESTS
# =============================================================================

class CreateOrderItemRequest(CamelModel):
    """A single product line of a new order."""

    product_id: UUID = Field(..., description="Product ID")
    quantity: int = Field(..., gt=0, le=MAX_QUANTITY, description="Units of the product")

    @field_validator("product_id")
    @classmethod
    def product_id_not_empty(cls, value: UUID) -> UUID:
        return _reject_nil(value, "ProductId")


class CreateOrderRequest(CamelModel):
    """Request DTO for creating an order."""

    reseller_id: UUID = Field(..., description="Reseller placing the order")
    customer_id: UUID = Field(..., description="Customer the order is for")
    items: List[CreateOrderItemRequest] = Field(
        ..., min_length=1, description="Order items (at least one)"
    )

    @field_validator("reseller_id")
    @classmethod
    def reseller_id_not_empty(cls, value: UUID) -> UUID:
        return _reject_nil(value, "ResellerId")

    @field_validator("customer_id")
    @classmethod
    def customer_id_not_empty(cls, value: UUID) -> UUID:
        return _reject_nil(value, "CustomerId")


class UpdateOrderStatusRequest(CamelModel):
    """Request DTO for moving an order to another status."""

    status_name: str = Field(..., min_length=1, description="New status name, e.g. Completed")

    @field_validator("status_name")
    @classmethod
    def status_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("StatusName cannot be empty")
        return value


# =============================================================================
# RESPONSES
# =============================================================================

class OrderSummaryDTO(CamelModel):
    """Order row in list responses."""

    id: UUID
    reseller_id: UUID
    customer_id: UUID
    status_id: UUID
    status_name: str
    item_count: int
    total_cost: MoneyAmount
    total_price: MoneyAmount
    created_date: datetime


class OrderItemDTO(CamelModel):
    """DTO for order item."""

    id: UUID
    order_id: UUID
    service_id: UUID
    service_name: str
    product_id: UUID
    product_name: str
    unit_cost: MoneyAmount
    unit_price: MoneyAmount
    quantity: int
    total_cost: MoneyAmount
    total_price: MoneyAmount


class OrderDetailDTO(CamelModel):
    """Response DTO for order details."""

    id: UUID
    reseller_id: UUID
    customer_id: UUID
    status_id: UUID
    status_name: str
    total_cost: MoneyAmount
    total_price: MoneyAmount
    created_date: datetime
    items: List[OrderItemDTO] = Field(default_factory=list)


class OrderStatusUpdatedDTO(CamelModel):
    """Response DTO for a successful status update."""

    message: str
    order_id: UUID
    new_status: str


class MonthlyProfitDTO(CamelModel):
    """Profit of completed orders within one calendar month."""

    year: int
    month: int = Field(..., ge=1, le=12)
    month_name: str
    total_profit: MoneyAmount
    order_count: int = Field(..., ge=0)
