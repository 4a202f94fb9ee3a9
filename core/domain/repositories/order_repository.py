"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.order import COMPLETED_STATUS, NewOrder, Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def list_orders(self) -> List[Order]:
        """List every order, newest first.

        Returns:
            List of Order aggregates ordered by creation date descending
        """
        pass

    @abstractmethod
    async def get_order(self, order_id: UUID) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_orders_by_status(self, status_name: str) -> List[Order]:
        """List orders whose status name matches case-insensitively.

        Args:
            status_name: Status name, e.g. "Completed"

        Returns:
            Matching orders, newest first. Empty for unknown statuses.
        """
        pass

    @abstractmethod
    async def update_status(self, order_id: UUID, status_name: str) -> bool:
        """Move an order to another status.

        Args:
            order_id: Order identifier
            status_name: Target status name (case-insensitive)

        Returns:
            False if the order or the status does not exist, True otherwise
        """
        pass

    @abstractmethod
    async def create_order(self, new_order: NewOrder) -> Order:
        """Persist a new order with its items.

        Args:
            new_order: Creation command

        Returns:
            The persisted Order

        Raises:
            DuplicateProductsError: If a product is requested twice
            ReferenceDataMissingError: If the Created status is missing
            ProductsNotFoundError: If requested products do not exist
        """
        pass

    async def list_completed_orders(self) -> List[Order]:
        """List orders in the Completed status."""
        return await self.list_orders_by_status(COMPLETED_STATUS)
