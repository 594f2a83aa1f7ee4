"""Pytest fixtures for catalog database testing."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fba_planner.api.app import app
from fba_planner.db.base import Base, get_db
from fba_planner.metrics.defaults import INITIAL_PRODUCTS
from fba_planner.metrics.models import ProductInput


# Use SQLite in-memory for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_db() -> AsyncGenerator[AsyncSession, None]:
    """Provide a test database session with isolated transactions.

    Creates an in-memory SQLite database, creates all tables,
    and yields a session. Overrides app's get_db dependency.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:

        async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

        app.dependency_overrides[get_db] = override_get_db

        try:
            yield session
        finally:
            app.dependency_overrides.clear()
            await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def penguin() -> ProductInput:
    """Penguin 20CM: 659 INR, in the 500-1000 closing fee band."""
    return INITIAL_PRODUCTS[0]


@pytest.fixture
def elephant() -> ProductInput:
    """Elephant 20CM: 299 INR, just under the referral fee threshold."""
    return INITIAL_PRODUCTS[1]
