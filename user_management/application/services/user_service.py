"""User service - application layer use cases for user accounts."""

import logging
from typing import List

from user_management.application.exceptions import UserAlreadyExistsError
from user_management.domain.entities.user import User
from user_management.domain.exceptions import UserNotFoundError
from user_management.domain.repositories.user_repository import IUserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    User service composing entity rules with repository calls.

    This service:
    1. Depends on the IUserRepository abstraction (not a concrete backend)
    2. Enforces the cross-record rule that emails are unique
    3. Keeps every per-record rule inside the User entity
    4. Holds no mutable state, so one instance serves concurrent requests

    Each operation is a short linear sequence of at most two repository
    calls. There is no transaction around them and no retry: every failure
    from the entity or the repository reaches the caller unchanged, except
    a found email on create, which becomes UserAlreadyExistsError.

    Known limitation: the email check on create is check-then-act. Two
    concurrent creates with the same email can both pass the check; the
    second insert then fails at the storage unique constraint, or, on a
    backend without one, both rows are written.
    """

    def __init__(self, user_repository: IUserRepository):
        """
        Initialize service with its repository.

        Args:
            user_repository: Storage backend (abstraction, not concrete class)

        Example:
            # Production
            service = UserService(UserRepository(session_factory))

            # Testing
            service = UserService(FakeUserRepository())
        """
        self._users = user_repository

    async def create_user(self, name: str, email: str, password: str) -> User:
        """
        Register a new user.

        Business rules:
        1. Email must not already be registered
        2. Name, email and password must satisfy the entity invariants

        Args:
            name: Display name
            email: Email address
            password: Opaque password, at least 8 characters

        Returns:
            The persisted user, with its assigned id

        Raises:
            UserAlreadyExistsError: If the email is already registered
            InvalidEntityStateException: If the input breaks an entity rule
        """
        try:
            await self._users.get_by_email(email)
        except UserNotFoundError:
            pass
        else:
            logger.warning("Rejected registration: email already registered")
            raise UserAlreadyExistsError(f"Email {email} already registered")

        user = User.create(name=name, email=email, password=password)
        created = await self._users.create(user)

        logger.info("Created user %s", created.id)
        return created

    async def get_user(self, user_id: str) -> User:
        """
        Retrieve user by ID.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        return await self._users.get(user_id)

    async def update_user(self, user_id: str, name: str, email: str) -> User:
        """
        Replace a user's name and email.

        The full record is read, changed in memory through the entity and
        written back, so validation happens only in User.update. The email
        is not re-checked for uniqueness here.

        Args:
            user_id: User ID to update
            name: New name
            email: New email

        Returns:
            The updated user, reflecting the new updated_at

        Raises:
            UserNotFoundError: If the user doesn't exist, including when it
                is deleted between the read and the write
            InvalidEntityStateException: If name or email is empty
        """
        user = await self._users.get(user_id)
        user.update(name=name, email=email)
        await self._users.update(user)

        logger.info("Updated user %s", user_id)
        return user

    async def delete_user(self, user_id: str) -> None:
        """
        Permanently delete a user.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        await self._users.delete(user_id)
        logger.info("Deleted user %s", user_id)

    async def list_users(self) -> List[User]:
        """Return every user, newest first."""
        return await self._users.list()
