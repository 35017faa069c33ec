"""Fixtures backed by an in-memory SQLite database (aiosqlite)."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.infrastructure.database import Base
from src.infrastructure.persistence.models import SampleEntity
from src.infrastructure.persistence.repositories import SqlDao


def _sample_entities() -> list[SampleEntity]:
    return [
        SampleEntity(id=f"item {i}", data=f"some data for item {i}") for i in range(10)
    ]


@pytest.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def dao(session) -> SqlDao:
    return SqlDao(session)


@pytest.fixture
async def populated_dao(dao):
    """Dao over a store holding "item 0".."item 9"; cleared again afterwards."""
    for entity in _sample_entities():
        await dao.save(entity)
    yield dao
    for entity in _sample_entities():
        await dao.delete(entity)


@pytest.fixture
def sample_entities():
    """Factory for fresh, unattached copies of the populated rows."""
    return _sample_entities
