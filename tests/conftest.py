"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures follow the Dependency Inversion Principle:
- Use the in-memory FakeUserRepository instead of a database
- Tests run fast and are isolated (each test gets a fresh fake)
"""

from datetime import UTC, datetime, timedelta

import pytest

from user_management.application.services.user_service import UserService
from user_management.domain.entities.user import User
from tests.fakes.user_repository_fake import FakeUserRepository


@pytest.fixture
def sample_user() -> User:
    """Create a stored sample user for testing."""
    created = datetime.now(UTC) - timedelta(days=2)
    return User(
        id="11111111-1111-4111-8111-111111111111",
        name="Test User",
        email="test@example.com",
        password="password123",
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def another_user() -> User:
    """Create another stored user, registered after sample_user."""
    created = datetime.now(UTC) - timedelta(days=1)
    return User(
        id="22222222-2222-4222-8222-222222222222",
        name="Another User",
        email="another@example.com",
        password="password456",
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def fake_repository() -> FakeUserRepository:
    """
    Provide a fresh, empty FakeUserRepository for each test.

    This ensures tests are isolated and don't affect each other.
    """
    return FakeUserRepository()


@pytest.fixture
def fake_repository_with_users(sample_user, another_user) -> FakeUserRepository:
    """
    Provide a FakeUserRepository pre-populated with users.

    Useful for testing operations on existing data.
    """
    return FakeUserRepository(initial_data=[sample_user, another_user])


@pytest.fixture
def user_service(fake_repository) -> UserService:
    """Provide a UserService over an empty fake repository."""
    return UserService(fake_repository)


@pytest.fixture
def user_service_with_data(fake_repository_with_users) -> UserService:
    """Provide a UserService over pre-populated data."""
    return UserService(fake_repository_with_users)
