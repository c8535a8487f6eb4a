"""
Fixtures for integration tests.

Provides:
- In-memory database for testing
- Repository seeded with the sample catalog
- Test client for FastAPI app
- Test client whose catalog store is failing
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from card_advisor.main import app
from card_advisor.core.dependencies import get_card_repository
from card_advisor.infrastructure.database import Base
from card_advisor.infrastructure.database.seed import seed_catalog
from card_advisor.infrastructure.repositories import PostgresCardRepository


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def card_repository(test_session: AsyncSession) -> PostgresCardRepository:
    """Repository over an empty catalog."""
    return PostgresCardRepository(test_session)


@pytest_asyncio.fixture
async def seeded_repository(card_repository: PostgresCardRepository) -> PostgresCardRepository:
    """Repository over the sample catalog."""
    await seed_catalog(card_repository)
    return card_repository


@pytest.fixture
def failing_repository() -> PostgresCardRepository:
    """Repository whose every query fails at the database."""
    session = MagicMock(spec=AsyncSession)
    session.execute = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
    )
    return PostgresCardRepository(session)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    seeded_repository: PostgresCardRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with the sample catalog.

    This client:
    - Uses an in-memory SQLite database
    - Serves the seeded sample catalog
    """
    async def override_get_card_repository():
        return seeded_repository

    app.dependency_overrides[get_card_repository] = override_get_card_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def empty_catalog_client(
    card_repository: PostgresCardRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client over an empty catalog."""
    async def override_get_card_repository():
        return card_repository

    app.dependency_overrides[get_card_repository] = override_get_card_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_failing_catalog(
    failing_repository: PostgresCardRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client where the catalog store always fails."""
    async def override_get_card_repository():
        return failing_repository

    app.dependency_overrides[get_card_repository] = override_get_card_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def fuel_spender_request() -> dict:
    """Mid-income user with heavy fuel spend and a modest fee budget."""
    return {
        "monthly_income": 50000,
        "spending_habits": {"fuel": 4000, "dining": 1500, "groceries": 2000},
        "preferred_benefits": ["rewards", "fuel_surcharge_waiver"],
        "credit_score": "good",
        "max_annual_fee": 2000,
    }


@pytest.fixture
def diner_request() -> dict:
    """User who eats out a lot and wants cashback."""
    return {
        "monthly_income": 40000,
        "spending_habits": {"dining": 5000},
        "preferred_benefits": ["cashback"],
        "max_annual_fee": 1000,
    }
