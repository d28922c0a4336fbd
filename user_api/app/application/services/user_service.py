"""
User profile application service.
"""
import logging
from typing import List, Optional
from uuid import UUID

from ..interfaces.unit_of_work import UnitOfWork
from ...domain.entities.user import User
from ...domain.exceptions import DuplicateEntityException, EntityNotFoundException

logger = logging.getLogger(__name__)


class UserService:
    """Listing, searching, editing and deleting user accounts."""

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def list_users(self) -> List[User]:
        """Return every account."""
        return await self._uow.users.find()

    async def search(
        self,
        id: Optional[UUID] = None,
        email: Optional[str] = None,
    ) -> List[User]:
        """Return accounts matching all given filters (possibly none)."""
        return await self._uow.users.find(id=id, email=email)

    async def edit(
        self,
        user_id: UUID,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """
        Change an account's name and/or email.

        Raises:
            EntityNotFoundException: no account with user_id
            DuplicateEntityException: email belongs to another account
            ValidationException: new values are invalid
        """
        user = await self._uow.users.get_by_id(user_id)
        if not user:
            raise EntityNotFoundException('User', user_id, message="User was not found!")

        if email is not None:
            owner = await self._uow.users.get_by_email(email)
            if owner and owner.id != user.id:
                raise DuplicateEntityException('User', 'email', owner.email)

        user.update_profile(name=name, email=email)

        updated = await self._uow.users.update(user)
        if updated is None:
            raise EntityNotFoundException('User', user_id, message="User was not found!")
        await self._uow.commit()

        logger.info("Updated user %s", user_id)
        return updated

    async def delete(self, user_id: UUID) -> None:
        """
        Delete an account.

        Raises:
            EntityNotFoundException: no account with user_id
        """
        deleted = await self._uow.users.delete(user_id)
        if not deleted:
            raise EntityNotFoundException(
                'User',
                user_id,
                message=f"The database does not have a user with {user_id}",
            )
        await self._uow.commit()

        logger.info("Deleted user %s", user_id)
