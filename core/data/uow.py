"""Transaction scope shared by one order workflow call."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.repositories import OrderRepository
from core.domain.value_objects import ExecutionID

from .repositories.order_repository_impl import SqlAlchemyOrderRepository


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    One session, one transaction, one ExecutionID.

    Repository writes are only flushed; nothing is durable until
    ``commit()``. Leaving the block with an exception rolls back, and the
    session is always closed on exit.

    Usage:
        async with create_uow(session_factory) as uow:
            if await uow.orders.update_status(order_id, "Completed"):
                await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._execution_id: Optional[ExecutionID] = None
        self._orders: Optional[OrderRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        self._session = self._session_factory()
        self._execution_id = ExecutionID.generate()
        logger.debug(f"[{self._execution_id}] Transaction opened")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        session = self._active_session()
        try:
            if exc_type is not None:
                logger.error(
                    f"[{self._execution_id}] Transaction failed "
                    f"({exc_type.__name__}: {exc_val}), rolling back"
                )
                await session.rollback()
        finally:
            await session.close()
            self._session = None
            self._orders = None

    def _active_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active; use 'async with create_uow(...)'")
        return self._session

    @property
    def execution_id(self) -> ExecutionID:
        """Tracing id of the current transaction, used as a log prefix."""
        if self._execution_id is None:
            raise RuntimeError("UnitOfWork is not active; use 'async with create_uow(...)'")
        return self._execution_id

    @property
    def orders(self) -> OrderRepository:
        """Order store bound to this transaction (created on first use)."""
        if self._orders is None:
            self._orders = SqlAlchemyOrderRepository(self._active_session())
        return self._orders

    async def commit(self) -> None:
        await self._active_session().commit()
        logger.info(f"[{self._execution_id}] ✅ Transaction committed")

    async def rollback(self) -> None:
        await self._active_session().rollback()
        logger.warning(f"[{self._execution_id}] Transaction rolled back")


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
