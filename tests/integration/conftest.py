"""Integration test fixtures.

Provides fixtures for integration testing with a real database and the
FastAPI app. Uses a SQLite in-memory database for fast, isolated tests.
"""

from collections.abc import AsyncGenerator

import httpx
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from user_management.infrastructure.config.settings import Settings
from user_management.infrastructure.persistence.database import (
    create_session_factory,
    create_tables,
)
from user_management.infrastructure.repositories.user_repository_impl import UserRepository
from user_management.main import create_app

# Test database URL (SQLite in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with the schema in place.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a test session factory."""
    return create_session_factory(test_engine)


@pytest_asyncio.fixture
async def user_repository(test_session_factory) -> UserRepository:
    """Provide the SQLAlchemy repository over the test database."""
    return UserRepository(test_session_factory)


@pytest_asyncio.fixture
async def test_app(test_engine: AsyncEngine) -> FastAPI:
    """Build the real application on top of the test engine."""
    settings = Settings(environment="test", DATABASE_URL=TEST_DATABASE_URL)
    return create_app(settings, engine=test_engine)


@pytest_asyncio.fixture
async def client(test_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient]:
    """
    Create an HTTP client that calls the app in-process.

    This client uses the real application, service and repository, but with
    an in-memory database.
    """
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
