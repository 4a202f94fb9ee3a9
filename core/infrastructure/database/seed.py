"""
Reference data seeding.

Order statuses are reference data every deployment needs; products and
services are loaded by the catalogue owner and are not seeded here.
"""
import logging
from typing import Iterable, List
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.data.models import OrderStatusModel


logger = logging.getLogger(__name__)


DEFAULT_STATUSES = ("Created", "Pending", "InProgress", "Completed", "Failed")


async def seed_order_statuses(
    session_factory: async_sessionmaker[AsyncSession],
    names: Iterable[str] = DEFAULT_STATUSES,
) -> List[str]:
    """
    Insert the lifecycle statuses that are missing.

    Existing rows are matched case-insensitively and left untouched.

    Args:
        session_factory: SQLAlchemy async session factory
        names: Status names to ensure

    Returns:
        Names that were inserted
    """
    async with session_factory() as session:
        result = await session.execute(select(func.lower(OrderStatusModel.name)))
        existing = set(result.scalars().all())

        inserted = [name for name in names if name.lower() not in existing]
        for name in inserted:
            session.add(OrderStatusModel(id=uuid4().bytes, name=name))

        await session.commit()

    if inserted:
        logger.info(f"✅ Seeded order statuses: {', '.join(inserted)}")
    else:
        logger.info("Order statuses already present")
    return inserted
