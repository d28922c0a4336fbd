# Domain Entities
from .base import Entity, utc_now
from .user import IdentityClaim, User

__all__ = [
    'Entity',
    'IdentityClaim',
    'User',
    'utc_now',
]
