"""User repository implementation using SQLAlchemy."""

import uuid
from dataclasses import replace
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_management.domain.entities.user import User
from user_management.domain.exceptions import UserNotFoundError
from user_management.domain.repositories.user_repository import IUserRepository
from user_management.infrastructure.persistence.models.user_model import UserModel


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of IUserRepository.

    This class contains all database-specific code and depends on:
    - SQLAlchemy (infrastructure)
    - UserModel (infrastructure ORM mapping)

    It implements the IUserRepository interface (domain) and returns
    domain entities, never exposing ORM models to the application layer.

    Each call runs in its own short session and transaction, so calls made
    by one service operation are independent of each other. SQLAlchemy
    errors (connectivity, constraint violations) propagate unchanged.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory sharing one engine pool
        """
        self._session_factory = session_factory

    async def create(self, entity: User) -> User:
        """Insert a new user under a freshly generated UUID."""
        created = replace(entity, id=str(uuid.uuid4()))

        async with self._session_factory() as session, session.begin():
            session.add(UserModel.from_entity(created))

        return created

    async def get(self, id: str) -> User:
        """Get user by ID."""
        async with self._session_factory() as session:
            user_model = await session.scalar(select(UserModel).where(UserModel.id == id))

        if user_model is None:
            raise UserNotFoundError(f"User with ID {id} not found")

        return user_model.to_entity()

    async def get_by_email(self, email: str) -> User:
        """Get user by email address."""
        async with self._session_factory() as session:
            user_model = await session.scalar(
                select(UserModel).where(UserModel.email == email)
            )

        if user_model is None:
            raise UserNotFoundError(f"User with email {email} not found")

        return user_model.to_entity()

    async def update(self, entity: User) -> None:
        """Write name, email and updated_at; zero rows affected means not found."""
        if entity.id is None:
            raise UserNotFoundError("Cannot update user without ID")

        async with self._session_factory() as session, session.begin():
            result = await session.execute(
                update(UserModel)
                .where(UserModel.id == entity.id)
                .values(
                    name=entity.name,
                    email=entity.email,
                    updated_at=entity.updated_at,
                )
            )

        if result.rowcount == 0:
            raise UserNotFoundError(f"User with ID {entity.id} not found")

    async def delete(self, id: str) -> None:
        """Delete user by ID."""
        async with self._session_factory() as session, session.begin():
            result = await session.execute(delete(UserModel).where(UserModel.id == id))

        if result.rowcount == 0:
            raise UserNotFoundError(f"User with ID {id} not found")

    async def list(self) -> List[User]:
        """Get all users, newest first."""
        async with self._session_factory() as session:
            result = await session.scalars(
                select(UserModel).order_by(UserModel.created_at.desc())
            )
            user_models = result.all()

        return [model.to_entity() for model in user_models]
