"""
PostgreSQL engine and session management.

The engine is built lazily from the DatabaseSettings handed to
DatabaseManager.configure() at application startup.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ...config import DatabaseSettings
from .models import Base
from .unit_of_work import SQLAlchemyUnitOfWork

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Process-wide owner of the async engine and its session factory."""

    _settings: Optional[DatabaseSettings] = None
    _engine: Optional[AsyncEngine] = None
    _session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def configure(cls, settings: DatabaseSettings) -> None:
        """Remember connection settings; an existing engine is kept."""
        cls._settings = settings

    @classmethod
    def get_engine(cls) -> AsyncEngine:
        if cls._engine is None:
            if cls._settings is None:
                raise RuntimeError("DatabaseManager is not configured")
            cls._engine = create_async_engine(
                cls._settings.url,
                echo=cls._settings.echo_sql,
                pool_size=cls._settings.pool_size,
                max_overflow=cls._settings.max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
            logger.info(
                "Database engine created for %s:%s/%s",
                cls._settings.host, cls._settings.port, cls._settings.name,
            )
        return cls._engine

    @classmethod
    def get_session_factory(cls) -> async_sessionmaker[AsyncSession]:
        if cls._session_factory is None:
            cls._session_factory = async_sessionmaker(
                bind=cls.get_engine(),
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return cls._session_factory

    @classmethod
    async def close(cls) -> None:
        """Dispose the engine; the next use builds a new one."""
        if cls._engine is not None:
            await cls._engine.dispose()
            cls._engine = None
            cls._session_factory = None


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Session that commits on success and rolls back on error.

    Usage:
        async with get_db_session() as session:
            await session.execute(...)
    """
    session = DatabaseManager.get_session_factory()()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


def get_unit_of_work() -> SQLAlchemyUnitOfWork:
    """New unit of work bound to the shared session factory."""
    return SQLAlchemyUnitOfWork(DatabaseManager.get_session_factory())


async def init_db() -> None:
    """Create missing tables (startup convenience; migrations live in alembic/)."""
    async with DatabaseManager.get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(is_production: bool) -> None:
    """
    Drop all tables.

    Refused when is_production is true.
    """
    if is_production:
        raise RuntimeError("Cannot drop database in production")

    async with DatabaseManager.get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


async def health_check() -> bool:
    """Return True if a trivial query succeeds."""
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
    except Exception:
        logger.warning("Database health check failed", exc_info=True)
        return False
    return True
