"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Optional
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.application.services.order_service import OrderApplicationService
from core.data.models import (
    Base,
    OrderItemModel,
    OrderModel,
    OrderStatusModel,
    ProductModel,
    ServiceModel,
)
from core.infrastructure.database.config import DatabaseSettings, create_engine, create_session_factory
from core.infrastructure.database.seed import seed_order_statuses


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

PRODUCT_UNIT_COST = Decimal("0.8")
PRODUCT_UNIT_PRICE = Decimal("0.9")
PRODUCT_PROFIT_PER_UNIT = PRODUCT_UNIT_PRICE - PRODUCT_UNIT_COST
PRODUCT_NAME = "100GB Mailbox"
SERVICE_NAME = "Email"

BACKUP_UNIT_COST = Decimal("2.5")
BACKUP_UNIT_PRICE = Decimal("4")
BACKUP_PRODUCT_NAME = "Cloud Backup 1TB"
BACKUP_SERVICE_NAME = "Backup"


@dataclass
class ReferenceData:
    """Identifiers of the seeded reference rows."""

    statuses: Dict[str, UUID] = field(default_factory=dict)
    service_id: Optional[UUID] = None
    product_id: Optional[UUID] = None
    backup_service_id: Optional[UUID] = None
    backup_product_id: Optional[UUID] = None


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_engine(DatabaseSettings(database_url=TEST_DATABASE_URL))

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Create test session factory."""
    return create_session_factory(test_engine)


def _add_product(session, name, service_name, unit_cost, unit_price):
    service_id, product_id = uuid4(), uuid4()
    session.add(ServiceModel(id=service_id.bytes, name=service_name))
    session.add(
        ProductModel(
            id=product_id.bytes,
            service_id=service_id.bytes,
            name=name,
            unit_cost=unit_cost,
            unit_price=unit_price,
        )
    )
    return service_id, product_id


@pytest_asyncio.fixture
async def products(session_factory) -> ReferenceData:
    """Seed services and products only (no statuses)."""
    reference = ReferenceData()
    async with session_factory() as session:
        reference.service_id, reference.product_id = _add_product(
            session, PRODUCT_NAME, SERVICE_NAME, PRODUCT_UNIT_COST, PRODUCT_UNIT_PRICE
        )
        reference.backup_service_id, reference.backup_product_id = _add_product(
            session, BACKUP_PRODUCT_NAME, BACKUP_SERVICE_NAME, BACKUP_UNIT_COST, BACKUP_UNIT_PRICE
        )
        await session.commit()
    return reference


@pytest_asyncio.fixture
async def reference_data(session_factory, products) -> ReferenceData:
    """Seed statuses, services and products."""
    await seed_order_statuses(session_factory)

    async with session_factory() as session:
        result = await session.execute(select(OrderStatusModel))
        products.statuses = {
            model.name: UUID(bytes=model.id) for model in result.scalars().all()
        }
    return products


@pytest_asyncio.fixture
async def add_order(session_factory, reference_data):
    """Insert an order directly, bypassing the store's creation path."""

    async def _add_order(
        status: str = "Created",
        created_date: Optional[datetime] = None,
        quantity: int = 1,
        product_id: Optional[UUID] = None,
    ) -> UUID:
        product_id = product_id or reference_data.product_id
        service_id = (
            reference_data.backup_service_id
            if product_id == reference_data.backup_product_id
            else reference_data.service_id
        )
        order_id = uuid4()

        async with session_factory() as session:
            session.add(
                OrderModel(
                    id=order_id.bytes,
                    reseller_id=uuid4().bytes,
                    customer_id=uuid4().bytes,
                    status_id=reference_data.statuses[status].bytes,
                    created_date=created_date or datetime.now(timezone.utc),
                )
            )
            session.add(
                OrderItemModel(
                    id=uuid4().bytes,
                    order_id=order_id.bytes,
                    product_id=product_id.bytes,
                    service_id=service_id.bytes,
                    quantity=quantity,
                    position=0,
                )
            )
            await session.commit()
        return order_id

    return _add_order


@pytest.fixture
def order_service(session_factory) -> OrderApplicationService:
    """Order workflow service bound to the test database."""
    return OrderApplicationService(session_factory=session_factory)
