"""
Unit tests for SQLAlchemyUnitOfWork.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from user_api.app.infrastructure.database import SQLAlchemyUnitOfWork
from user_api.app.infrastructure.database.repositories import SQLAlchemyUserRepository


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def session_factory(mock_session):
    return MagicMock(return_value=mock_session)


class TestSQLAlchemyUnitOfWork:
    """Test transaction boundaries."""

    @pytest.mark.asyncio
    async def test_enter_binds_user_repository(self, session_factory, mock_session):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert isinstance(uow.users, SQLAlchemyUserRepository)
            assert uow.session is mock_session

        session_factory.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_commit_then_close(self, session_factory, mock_session):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            await uow.commit()

        mock_session.commit.assert_awaited_once()
        mock_session.rollback.assert_not_awaited()
        mock_session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self, session_factory, mock_session):
        with pytest.raises(ValueError):
            async with SQLAlchemyUnitOfWork(session_factory):
                raise ValueError("boom")

        mock_session.rollback.assert_awaited_once()
        mock_session.close.assert_awaited_once()

    def test_session_outside_context(self, session_factory):
        with pytest.raises(RuntimeError):
            SQLAlchemyUnitOfWork(session_factory).session
