"""Application layer interfaces."""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from core.application.dtos.order_dto import (
    CreateOrderRequest,
    MonthlyProfitDTO,
    OrderDetailDTO,
    OrderSummaryDTO,
)


class IOrderService(ABC):
    """
    Interface for order workflow operations.

    The API layer depends on this contract only, so an in-memory or stub
    implementation can replace the database-backed service.
    """

    @abstractmethod
    async def list_orders(self) -> List[OrderSummaryDTO]:
        """List every order, newest first."""
        pass

    @abstractmethod
    async def get_order(self, order_id: UUID) -> Optional[OrderDetailDTO]:
        """
        Get one order with its items.

        Args:
            order_id: Order identifier

        Returns:
            Order details if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_orders_by_status(self, status_name: str) -> List[OrderSummaryDTO]:
        """List orders in a status (case-insensitive name match)."""
        pass

    @abstractmethod
    async def update_order_status(self, order_id: UUID, status_name: str) -> bool:
        """
        Move an order to another status.

        Returns:
            False when the order or the status does not exist
        """
        pass

    @abstractmethod
    async def create_order(self, request: CreateOrderRequest) -> OrderDetailDTO:
        """
        Create an order in the Created status.

        Raises:
            DuplicateProductsError: If a product is requested twice
            ProductsNotFoundError: If requested products do not exist
            ReferenceDataMissingError: If the Created status is missing
        """
        pass

    @abstractmethod
    async def calculate_monthly_profit(self) -> List[MonthlyProfitDTO]:
        """Profit of completed orders grouped by calendar month, oldest first."""
        pass
