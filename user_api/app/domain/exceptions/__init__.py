# Domain Exceptions
from .domain_exceptions import (
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    HashingException,
    PasswordMismatchException,
    TokenVerificationException,
    ValidationException,
)

__all__ = [
    'DomainException',
    'DuplicateEntityException',
    'EntityNotFoundException',
    'HashingException',
    'PasswordMismatchException',
    'TokenVerificationException',
    'ValidationException',
]
