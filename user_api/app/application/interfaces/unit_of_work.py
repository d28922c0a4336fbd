"""
Unit of Work port.

Groups the repository calls of one request into a single transaction:
services write through ``uow.users`` and call ``commit()`` once the whole
operation has succeeded.
"""
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from .repositories import UserRepository


class UnitOfWork(ABC):
    """
    Abstract Unit of Work.

    async with unit_of_work as uow:
        user = await uow.users.get_by_id(user_id)
        user.update_profile(name="Dan")
        await uow.users.update(user)
        await uow.commit()

    Leaving the block with an exception rolls back whatever was not
    committed.
    """

    users: UserRepository

    async def __aenter__(self) -> 'UnitOfWork':
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType]
    ) -> None:
        if exc_type is not None:
            await self.rollback()
        await self.close()

    @abstractmethod
    async def commit(self) -> None:
        """Make the pending changes durable."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard uncommitted changes."""

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""
