"""
Application ports: repositories, unit of work and security services.
"""
from .repositories import Repository, UserRepository
from .services import PasswordHasher, TokenService
from .unit_of_work import UnitOfWork

__all__ = [
    'PasswordHasher',
    'Repository',
    'TokenService',
    'UnitOfWork',
    'UserRepository',
]
