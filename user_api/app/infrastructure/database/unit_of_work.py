"""
SQLAlchemy Unit of Work implementation.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...application.interfaces.unit_of_work import UnitOfWork
from .repositories.user_repository import SQLAlchemyUserRepository


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work over a single AsyncSession.

    The session and the user repository bound to it only exist between
    __aenter__ and close(); each request gets a fresh one.
    """

    users: SQLAlchemyUserRepository

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        self._session = self._session_factory()
        self.users = SQLAlchemyUserRepository(self._session)
        return self

    @property
    def session(self) -> AsyncSession:
        """Active session; only valid inside ``async with``."""
        if self._session is None:
            raise RuntimeError("Unit of work not started. Use 'async with' context.")
        return self._session

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        if self._session is not None:
            await self._session.rollback()

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None
