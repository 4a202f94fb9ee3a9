"""Integration tests for reference data seeding."""

from uuid import uuid4

import pytest
from sqlalchemy import select

from core.data.models import OrderStatusModel
from core.infrastructure.database.seed import DEFAULT_STATUSES, seed_order_statuses


async def _status_names(session_factory):
    async with session_factory() as session:
        result = await session.execute(select(OrderStatusModel.name))
        return sorted(result.scalars().all())


@pytest.mark.asyncio
async def test_seed_inserts_all_statuses(session_factory):
    inserted = await seed_order_statuses(session_factory)

    assert inserted == list(DEFAULT_STATUSES)
    assert await _status_names(session_factory) == sorted(DEFAULT_STATUSES)


@pytest.mark.asyncio
async def test_seed_is_idempotent(session_factory):
    await seed_order_statuses(session_factory)

    assert await seed_order_statuses(session_factory) == []
    assert len(await _status_names(session_factory)) == len(DEFAULT_STATUSES)


@pytest.mark.asyncio
async def test_seed_matches_existing_names_case_insensitively(session_factory):
    async with session_factory() as session:
        session.add(OrderStatusModel(id=uuid4().bytes, name="completed"))
        await session.commit()

    inserted = await seed_order_statuses(session_factory)

    assert "Completed" not in inserted
    assert "completed" in await _status_names(session_factory)
    assert len(await _status_names(session_factory)) == len(DEFAULT_STATUSES)
