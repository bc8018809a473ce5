"""Repository implementations using SQLAlchemy."""

from user_management.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = ["UserRepository"]
