"""
Repository interfaces (ports) for domain entities.

These interfaces define the contract for persistence operations
without specifying the implementation details.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from ...domain.entities.user import User


# Generic type for entities
T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Defines common CRUD operations for all repositories.
    """

    @abstractmethod
    async def get_by_id(self, id: UUID) -> Optional[T]:
        """
        Get entity by ID.

        Args:
            id: Entity UUID

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """
        Add new entity.

        Args:
            entity: Entity to add

        Returns:
            Added entity
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> Optional[T]:
        """
        Update existing entity.

        Args:
            entity: Entity to update

        Returns:
            Updated entity, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, id: UUID) -> bool:
        """
        Delete entity by ID.

        Args:
            id: Entity UUID

        Returns:
            True if deleted, False if not found
        """
        pass


class UserRepository(Repository[User]):
    """Repository interface for User entities."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address."""
        pass

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        """Check if email is already registered."""
        pass

    @abstractmethod
    async def find(
        self,
        id: Optional[UUID] = None,
        email: Optional[str] = None,
    ) -> List[User]:
        """
        Find users matching every given filter.

        Filters left as None are ignored; with no filters all users
        are returned.
        """
        pass
