"""
Domain Exceptions - Custom exceptions for domain-specific errors.
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    All domain exceptions should inherit from this class to allow
    for consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details
        }


class EntityNotFoundException(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        entity_type: str,
        entity_id: Optional[Any] = None,
        message: Optional[str] = None
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} not found"
        if entity_id and not message:
            msg = f"{entity_type} with id '{entity_id}' not found"
        super().__init__(
            message=msg,
            code='ENTITY_NOT_FOUND',
            details={'entity_type': entity_type, 'entity_id': str(entity_id) if entity_id else None}
        )


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Can contain multiple validation errors for different fields.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[Dict[str, list]] = None
    ):
        self.errors = errors or {}
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            details={'validation_errors': self.errors}
        )


class DuplicateEntityException(DomainException):
    """Raised when attempting to create an entity that already exists."""

    def __init__(
        self,
        entity_type: str,
        field: str,
        value: Any
    ):
        super().__init__(
            message=f"{entity_type} with {field}='{value}' already exists",
            code='DUPLICATE_ENTITY',
            details={
                'entity_type': entity_type,
                'field': field,
                'value': str(value)
            }
        )


class PasswordMismatchException(DomainException):
    """
    Raised when a password does not match the stored credential.

    Also raised when the hashing library fails during verification, so
    callers only ever see "match" or "mismatch".
    """

    def __init__(self, message: str = "Mismatch passwords"):
        super().__init__(message=message, code='PASSWORD_MISMATCH')


class HashingException(DomainException):
    """Raised when a password cannot be hashed."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message=message, code='HASHING_FAILED')


class TokenVerificationException(DomainException):
    """
    Raised when a token is rejected.

    The reason is one of REASONS and is kept server side; to_dict()
    omits it so clients cannot tell the cases apart.
    """

    BAD_SIGNATURE = 'bad-signature'
    EXPIRED = 'expired'
    MALFORMED = 'malformed'
    REASONS = (BAD_SIGNATURE, EXPIRED, MALFORMED)

    def __init__(self, reason: str):
        if reason not in self.REASONS:
            raise ValueError(f"Unknown token failure reason: {reason}")
        self.reason = reason
        super().__init__(message="Invalid Token!", code='INVALID_TOKEN')
