"""
SQLAlchemy model for User entity.
"""
from sqlalchemy import Column, String

from .base import BaseModel
from ....domain.entities.user import User
from ....domain.value_objects.email import Email


class UserModel(BaseModel):
    """SQLAlchemy model for users table."""

    __tablename__ = 'users'

    email = Column(String(254), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)

    def to_domain(self) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=self.id,
            email=Email(self.email),
            password_hash=self.password_hash,
            name=self.name,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_domain(cls, user: User) -> 'UserModel':
        """Create ORM model from domain entity."""
        return cls(
            id=user.id,
            email=str(user.email),
            password_hash=user.password_hash,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def update_from_domain(self, user: User) -> None:
        """Copy profile fields from the domain entity."""
        self.email = str(user.email)
        self.password_hash = user.password_hash
        self.name = user.name
        self.updated_at = user.updated_at
