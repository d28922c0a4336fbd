"""
SQLAlchemy ORM models.
"""
from .base import Base, BaseModel, TimestampMixin, UUIDMixin
from .user_model import UserModel

__all__ = [
    'Base',
    'BaseModel',
    'TimestampMixin',
    'UUIDMixin',
    'UserModel',
]
