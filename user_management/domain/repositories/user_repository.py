"""User repository interface."""

from abc import abstractmethod

from user_management.domain.entities.user import User
from user_management.domain.repositories.base import IRepository


class IUserRepository(IRepository[User]):
    """
    User-specific repository interface.

    Every lookup that finds nothing raises UserNotFoundError instead of
    returning None, and update/delete raise it when zero rows are affected.
    Any other backend failure propagates as the backend's own exception.

    Implementations must be safe for concurrent use by many simultaneous
    service calls.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> User:
        """
        Find a user by their email address.

        Used by the user service for its uniqueness pre-check.

        Args:
            email: The user's email

        Returns:
            The stored user, including password

        Raises:
            UserNotFoundError: If no user has that email
        """
        pass
