"""
In-memory SQLite fixtures for persistence and API tests.

Each test gets a fresh database. StaticPool keeps the single in-memory
connection alive for the lifetime of the engine, so every session sees
the same data.

Usage:
    # In your test file or conftest.py
    from tests.shared.fixtures.database import db_session

    async def test_something(db_session):
        repo = SomeRepository(db_session)
        await repo.save(entity)
"""

from uuid import UUID

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hrm_identity.infrastructure.persistence.sqlalchemy import IdentityBase

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Fixed UUIDs for testing - ensures deterministic behavior
TEST_COMPANY_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_EMPLOYEE_ID = UUID("00000000-0000-0000-0000-0000000000e1")
TEST_ADMIN_ID = UUID("00000000-0000-0000-0000-0000000000a1")


@pytest_asyncio.fixture
async def async_engine():
    """Create an in-memory SQLite engine with all identity tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine):
    """Create a fresh AsyncSession for a test."""
    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session
