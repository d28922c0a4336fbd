"""
SQLAlchemy implementation of UserRepository.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ....application.interfaces.repositories import UserRepository
from ....domain.entities.user import User
from ....domain.exceptions import DuplicateEntityException
from ....domain.value_objects.email import Email
from ..models.user_model import UserModel


class SQLAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, id: UUID) -> Optional[User]:
        """Get user by ID."""
        model = await self._get_model(id)
        return model.to_domain() if model else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == Email.normalize(email))
        )
        model = result.scalar_one_or_none()
        return model.to_domain() if model else None

    async def email_exists(self, email: str) -> bool:
        """Check if email is already registered."""
        result = await self._session.execute(
            select(func.count()).select_from(UserModel).where(
                UserModel.email == Email.normalize(email)
            )
        )
        count = result.scalar()
        return bool(count)

    async def find(
        self,
        id: Optional[UUID] = None,
        email: Optional[str] = None,
    ) -> List[User]:
        """Find users matching all given filters, oldest first."""
        query = select(UserModel)

        if id is not None:
            query = query.where(UserModel.id == id)
        if email is not None:
            query = query.where(UserModel.email == Email.normalize(email))

        query = query.order_by(UserModel.created_at.asc())

        result = await self._session.execute(query)
        models = result.scalars().all()
        return [m.to_domain() for m in models]

    async def add(self, entity: User) -> User:
        """Add new user."""
        model = UserModel.from_domain(entity)
        self._session.add(model)
        await self._flush_unique(entity)
        return model.to_domain()

    async def update(self, entity: User) -> Optional[User]:
        """Update existing user."""
        model = await self._get_model(entity.id)
        if model is None:
            return None
        model.update_from_domain(entity)
        await self._flush_unique(entity)
        return model.to_domain()

    async def delete(self, id: UUID) -> bool:
        """Delete user by ID."""
        model = await self._get_model(id)
        if model:
            await self._session.delete(model)
            await self._session.flush()
            return True
        return False

    async def _get_model(self, id: UUID) -> Optional[UserModel]:
        result = await self._session.execute(
            select(UserModel).where(UserModel.id == id)
        )
        return result.scalar_one_or_none()

    async def _flush_unique(self, entity: User) -> None:
        """Flush, turning an email uniqueness violation into a domain error."""
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise DuplicateEntityException('User', 'email', str(entity.email)) from e
