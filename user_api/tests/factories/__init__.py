"""
Test data factories for the User Accounts API.

Provides factory classes for generating test data.
"""
from .user_factory import RegistrationFactory, UserFactory

__all__ = [
    "RegistrationFactory",
    "UserFactory",
]
