"""Application service for Order operations."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.order_dto import (
    CreateOrderRequest,
    MonthlyProfitDTO,
    OrderDetailDTO,
    OrderItemDTO,
    OrderSummaryDTO,
)
from core.application.interfaces import IOrderService
from core.application.services.monthly_profit import summarize_monthly_profit
from core.data.uow import create_uow
from core.domain.entities.order import NewOrder, NewOrderLine, Order


logger = logging.getLogger(__name__)


class OrderApplicationService(IOrderService):
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Scope every operation to one Unit of Work (one transaction)
    - Commit writes, roll back on failure
    - Transform between DTOs and domain entities
    - Aggregate monthly profit of completed orders
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def list_orders(self) -> List[OrderSummaryDTO]:
        """List every order, newest first.

        Returns:
            List of OrderSummaryDTO instances
        """
        uow = create_uow(self._session_factory)
        async with uow:
            orders = await uow.orders.list_orders()
            return [self._order_to_summary(order) for order in orders]

    async def get_order(self, order_id: UUID) -> Optional[OrderDetailDTO]:
        """Get order by ID.

        Args:
            order_id: Order identifier

        Returns:
            OrderDetailDTO if found, None otherwise
        """
        uow = create_uow(self._session_factory)
        async with uow:
            order = await uow.orders.get_order(order_id)

            if not order:
                return None

            return self._order_to_detail(order)

    async def list_orders_by_status(self, status_name: str) -> List[OrderSummaryDTO]:
        """List orders in a status.

        Args:
            status_name: Status name, matched case-insensitively

        Returns:
            List of OrderSummaryDTO instances (empty for unknown statuses)
        """
        uow = create_uow(self._session_factory)
        async with uow:
            orders = await uow.orders.list_orders_by_status(status_name)
            return [self._order_to_summary(order) for order in orders]

    async def update_order_status(self, order_id: UUID, status_name: str) -> bool:
        """Move an order to another status.

        Args:
            order_id: Order identifier
            status_name: Target status name

        Returns:
            True if updated, False if the order or status does not exist
        """
        uow = create_uow(self._session_factory)
        async with uow:
            updated = await uow.orders.update_status(order_id, status_name)
            if not updated:
                logger.info(
                    f"[{uow.execution_id}] Status update skipped for order {order_id} "
                    f"(status={status_name!r})"
                )
                return False

            await uow.commit()
            logger.info(f"[{uow.execution_id}] Order {order_id} status set to {status_name!r}")
            return True

    async def create_order(self, request: CreateOrderRequest) -> OrderDetailDTO:
        """Create a new order.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderDetailDTO with created order details
        """
        new_order = self._request_to_new_order(request)

        uow = create_uow(self._session_factory)
        async with uow:
            logger.info(
                f"[{uow.execution_id}] Creating order for customer {new_order.customer_id} "
                f"with {len(new_order.lines)} items"
            )

            # Validation, persistence and re-read happen in the store
            order = await uow.orders.create_order(new_order)

            # Atomic commit
            await uow.commit()

            logger.info(f"[{uow.execution_id}] ✅ Order {order.order_id} created")
            return self._order_to_detail(order)

    async def calculate_monthly_profit(self) -> List[MonthlyProfitDTO]:
        """Calculate profit by calendar month for all completed orders.

        Returns:
            One MonthlyProfitDTO per month with completed orders, oldest first
        """
        uow = create_uow(self._session_factory)
        async with uow:
            completed = await uow.orders.list_completed_orders()

        monthly = summarize_monthly_profit(completed)
        logger.info(
            f"Monthly profit computed over {len(completed)} completed orders "
            f"({len(monthly)} months)"
        )

        return [
            MonthlyProfitDTO(
                year=entry.year,
                month=entry.month,
                month_name=entry.month_name,
                total_profit=entry.total_profit,
                order_count=entry.order_count,
            )
            for entry in monthly
        ]

    def _request_to_new_order(self, request: CreateOrderRequest) -> NewOrder:
        """Transform CreateOrderRequest DTO to the NewOrder command.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            NewOrder domain command
        """
        return NewOrder(
            reseller_id=request.reseller_id,
            customer_id=request.customer_id,
            lines=[
                NewOrderLine(product_id=item.product_id, quantity=item.quantity)
                for item in request.items
            ],
        )

    def _order_to_summary(self, order: Order) -> OrderSummaryDTO:
        """Transform Order domain entity to OrderSummaryDTO."""
        return OrderSummaryDTO(
            id=order.order_id,
            reseller_id=order.reseller_id,
            customer_id=order.customer_id,
            status_id=order.status.status_id,
            status_name=order.status.name,
            item_count=order.item_count,
            total_cost=order.total_cost,
            total_price=order.total_price,
            created_date=order.created_date,
        )

    def _order_to_detail(self, order: Order) -> OrderDetailDTO:
        """Transform Order domain entity to OrderDetailDTO.

        Args:
            order: Order domain entity

        Returns:
            OrderDetailDTO instance
        """
        items = [
            OrderItemDTO(
                id=item.item_id,
                order_id=item.order_id,
                service_id=item.service.service_id,
                service_name=item.service.name,
                product_id=item.product.product_id,
                product_name=item.product.name,
                unit_cost=item.product.unit_cost,
                unit_price=item.product.unit_price,
                quantity=item.quantity,
                total_cost=item.total_cost,
                total_price=item.total_price,
            )
            for item in order.items
        ]

        return OrderDetailDTO(
            id=order.order_id,
            reseller_id=order.reseller_id,
            customer_id=order.customer_id,
            status_id=order.status.status_id,
            status_name=order.status.name,
            total_cost=order.total_cost,
            total_price=order.total_price,
            created_date=order.created_date,
            items=items,
        )
