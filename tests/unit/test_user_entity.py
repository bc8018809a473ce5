"""Unit tests for User domain entity.

Tests business rules and validations for the User entity:
1. Construction of new users with validation
2. Rehydration of stored users
3. Name/email update with validation and timestamp refresh
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from user_management.domain.entities import user as user_module
from user_management.domain.entities.user import User
from user_management.domain.exceptions import InvalidEntityStateException

pytestmark = pytest.mark.unit


# === USER CREATION TESTS ===


def test_create_valid_user():
    """Test constructing a new user with valid data."""
    # Arrange & Act
    user = User.create("John Doe", "john@example.com", "password123")

    # Assert
    assert user.name == "John Doe"
    assert user.email == "john@example.com"
    assert user.password == "password123"
    assert user.id is None
    assert user.created_at is not None
    assert user.created_at == user.updated_at
    assert user.created_at.tzinfo is not None


@pytest.mark.parametrize(
    ("name", "email", "password", "message"),
    [
        ("", "john@example.com", "password123", "Name cannot be empty"),
        ("John Doe", "", "password123", "Email cannot be empty"),
        ("John Doe", "john@example.com", "pass", "at least 8 characters"),
        ("John Doe", "john@example.com", "", "at least 8 characters"),
    ],
)
def test_create_user_invalid_input(name, email, password, message):
    """Test that empty name/email or a short password is rejected."""
    with pytest.raises(InvalidEntityStateException, match=message) as exc_info:
        User.create(name, email, password)

    assert exc_info.value.error_code == "INVALID_ENTITY_STATE"


def test_create_user_password_exactly_minimum_length():
    """Test that an 8 character password is accepted."""
    user = User.create("John Doe", "john@example.com", "12345678")

    assert user.password == "12345678"


def test_create_user_does_not_check_email_format():
    """Test that email format is not validated by the entity."""
    user = User.create("John Doe", "not-an-email", "password123")

    assert user.email == "not-an-email"


# === REHYDRATION TESTS ===


def test_rehydrate_stored_user(sample_user):
    """Test building a user from stored fields keeps them as is."""
    assert sample_user.id == "11111111-1111-4111-8111-111111111111"
    assert sample_user.password == "password123"


def test_rehydrate_user_with_empty_name():
    """Test that a user can never exist with an empty name."""
    with pytest.raises(InvalidEntityStateException, match="Name cannot be empty"):
        User(name="", email="test@example.com", password="password123")


# === UPDATE TESTS ===


def test_update_success(sample_user):
    """Test updating name and email refreshes updated_at only."""
    # Arrange
    original_id = sample_user.id
    original_password = sample_user.password
    original_created_at = sample_user.created_at
    original_updated_at = sample_user.updated_at

    # Act
    sample_user.update("New Name", "new@example.com")

    # Assert
    assert sample_user.name == "New Name"
    assert sample_user.email == "new@example.com"
    assert sample_user.updated_at > original_updated_at
    assert sample_user.id == original_id
    assert sample_user.password == original_password
    assert sample_user.created_at == original_created_at


@pytest.mark.parametrize(
    ("name", "email", "message"),
    [
        ("", "new@example.com", "Name cannot be empty"),
        ("New Name", "", "Email cannot be empty"),
    ],
)
def test_update_invalid_input_leaves_user_unchanged(sample_user, name, email, message):
    """Test that a rejected update does not modify the user."""
    original_updated_at = sample_user.updated_at

    with pytest.raises(InvalidEntityStateException, match=message):
        sample_user.update(name, email)

    assert sample_user.name == "Test User"
    assert sample_user.email == "test@example.com"
    assert sample_user.updated_at == original_updated_at


def test_update_sets_updated_at_to_current_time(sample_user):
    """Test that updated_at equals the time of the update."""
    frozen = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)

    with patch.object(user_module, "datetime", wraps=datetime) as mock_datetime:
        mock_datetime.now.return_value = frozen
        sample_user.update("New Name", "new@example.com")

    assert sample_user.updated_at == frozen


def test_update_strictly_increases_updated_at_when_clock_stalls():
    """Test consecutive updates within one clock tick still advance updated_at."""
    frozen = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)

    with patch.object(user_module, "datetime", wraps=datetime) as mock_datetime:
        mock_datetime.now.return_value = frozen
        user = User.create("John Doe", "john@example.com", "password123")
        user.update("First", "first@example.com")
        first = user.updated_at
        user.update("Second", "second@example.com")

    assert first > user.created_at
    assert user.updated_at > first
    assert user.updated_at - first == timedelta(microseconds=1)
