"""SQLAlchemy implementation of OrderRepository."""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.order import CREATED_STATUS, NewOrder, Order
from core.domain.exceptions import (
    DuplicateProductsError,
    ProductsNotFoundError,
    ReferenceDataMissingError,
)
from core.domain.repositories.order_repository import OrderRepository

from ..mappers import OrderItemMapper, OrderMapper, bytes_to_uuid, uuid_to_bytes
from ..models.order_model import OrderItemModel, OrderModel, OrderStatusModel, ProductModel


logger = logging.getLogger(__name__)


def _order_load_options():
    """Eager loads needed to hydrate an Order aggregate."""
    return (
        selectinload(OrderModel.status),
        selectinload(OrderModel.items)
        .selectinload(OrderItemModel.product)
        .selectinload(ProductModel.service),
    )


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def list_orders(self) -> List[Order]:
        """List every order, newest first.

        Returns:
            List of Order aggregates
        """
        result = await self._session.execute(
            select(OrderModel)
            .options(*_order_load_options())
            .order_by(OrderModel.created_date.desc())
        )
        models = result.scalars().all()

        logger.info(f"Found {len(models)} orders")
        return [OrderMapper.to_domain(model) for model in models]

    async def get_order(self, order_id: UUID) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        result = await self._session.execute(
            select(OrderModel)
            .options(*_order_load_options())
            .where(OrderModel.id == uuid_to_bytes(order_id))
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()

        if not model:
            logger.info(f"Order not found: {order_id}")
            return None

        return OrderMapper.to_domain(model)

    async def list_orders_by_status(self, status_name: str) -> List[Order]:
        """List orders whose status name matches case-insensitively.

        Args:
            status_name: Status name

        Returns:
            Matching orders, newest first
        """
        result = await self._session.execute(
            select(OrderModel)
            .join(OrderModel.status)
            .options(*_order_load_options())
            .where(func.lower(OrderStatusModel.name) == status_name.lower())
            .order_by(OrderModel.created_date.desc())
        )
        models = result.scalars().all()

        logger.info(f"Found {len(models)} orders with status {status_name}")
        return [OrderMapper.to_domain(model) for model in models]

    async def update_status(self, order_id: UUID, status_name: str) -> bool:
        """Move an order to another status.

        Args:
            order_id: Order identifier
            status_name: Target status name (case-insensitive)

        Returns:
            False if the order or the status does not exist, True otherwise
        """
        result = await self._session.execute(
            select(OrderModel).where(OrderModel.id == uuid_to_bytes(order_id))
        )
        order_model = result.scalar_one_or_none()
        if order_model is None:
            logger.info(f"Order not found for status update: {order_id}")
            return False

        status_model = await self._find_status(status_name)
        if status_model is None:
            logger.info(f"Unknown status for order {order_id}: {status_name!r}")
            return False

        order_model.status_id = status_model.id
        await self._session.flush()  # Propagate to DB without committing

        logger.info(f"✅ Order {order_id} moved to status {status_model.name}")
        return True

    async def create_order(self, new_order: NewOrder) -> Order:
        """Persist a new order with its items.

        Checks run in a fixed order: duplicate products, Created status,
        product existence. Nothing is added to the session before all of
        them pass.

        Args:
            new_order: Creation command

        Returns:
            The persisted Order, re-read from the database
        """
        duplicates = new_order.duplicate_product_ids()
        if duplicates:
            logger.warning(f"Rejected order with duplicate products: {duplicates}")
            raise DuplicateProductsError(duplicates)

        created_status = await self._find_status(CREATED_STATUS)
        if created_status is None:
            logger.critical(f"{CREATED_STATUS} status not found in database")
            raise ReferenceDataMissingError(f"{CREATED_STATUS} status not found in database")

        requested_ids = new_order.product_ids
        result = await self._session.execute(
            select(ProductModel)
            .options(selectinload(ProductModel.service))
            .where(ProductModel.id.in_([uuid_to_bytes(pid) for pid in requested_ids]))
        )
        products = {bytes_to_uuid(model.id): model for model in result.scalars().all()}

        missing = [pid for pid in requested_ids if pid not in products]
        if missing:
            logger.warning(f"Rejected order with unknown products: {missing}")
            raise ProductsNotFoundError(missing)

        order_id = uuid4()
        order_model = OrderMapper.to_persistence(
            order_id=order_id,
            reseller_id=new_order.reseller_id,
            customer_id=new_order.customer_id,
            status=created_status,
            created_date=datetime.now(timezone.utc),
        )
        order_model.items = [
            OrderItemMapper.to_persistence(
                item_id=uuid4(),
                order_id=order_id,
                product=products[line.product_id],
                quantity=line.quantity,
                position=position,
            )
            for position, line in enumerate(new_order.lines)
        ]

        self._session.add(order_model)
        await self._session.flush()

        logger.info(f"✅ Created order {order_id} with {len(order_model.items)} items")

        order = await self.get_order(order_id)
        if order is None:
            raise RuntimeError(f"Order {order_id} not readable after flush")
        return order

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    async def _find_status(self, status_name: str) -> Optional[OrderStatusModel]:
        """Resolve a status row by case-insensitive name."""
        result = await self._session.execute(
            select(OrderStatusModel)
            .where(func.lower(OrderStatusModel.name) == status_name.lower())
            .limit(1)
        )
        return result.scalars().first()
