"""Base repository interfaces following Clean Architecture."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List

# Generic type for domain entities
T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Base repository interface defining standard CRUD operations.

    This interface belongs to the DOMAIN layer and defines the contract
    for data access without any implementation details.

    Every method is a coroutine. Cancelling the awaiting task aborts the
    storage call in flight and raises asyncio.CancelledError to the caller.

    Type Parameters:
        T: The domain entity type this repository manages
    """

    @abstractmethod
    async def create(self, entity: T) -> T:
        """
        Persist a new entity that has no identifier yet.

        Args:
            entity: The entity to persist

        Returns:
            A copy of the entity carrying the storage-assigned id
        """
        pass

    @abstractmethod
    async def get(self, id: str) -> T:
        """
        Retrieve an entity by its ID.

        Args:
            id: The unique identifier

        Returns:
            The stored entity

        Raises:
            A not-found exception if no record has that id
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> None:
        """
        Write back the mutable fields of an existing entity.

        Args:
            entity: The entity to persist, keyed by its id

        Raises:
            A not-found exception if no record was affected
        """
        pass

    @abstractmethod
    async def delete(self, id: str) -> None:
        """
        Delete an entity by ID.

        Args:
            id: The unique identifier

        Raises:
            A not-found exception if no record was affected
        """
        pass

    @abstractmethod
    async def list(self) -> List[T]:
        """
        Retrieve all entities, newest first.

        Returns:
            List of entities ordered by creation time descending,
            empty when nothing is stored
        """
        pass
