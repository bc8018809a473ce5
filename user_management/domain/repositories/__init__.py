"""Repository interfaces - define contracts for data access."""

from user_management.domain.repositories.base import IRepository
from user_management.domain.repositories.user_repository import IUserRepository

__all__ = ["IRepository", "IUserRepository"]
