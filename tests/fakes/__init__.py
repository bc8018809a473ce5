"""Fake implementations for testing."""

from tests.fakes.user_repository_fake import FakeUserRepository

__all__ = ["FakeUserRepository"]
