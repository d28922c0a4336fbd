"""
External service interfaces (ports).

These interfaces define contracts for the security services
that the application depends on.
"""
from abc import ABC, abstractmethod
from datetime import timedelta

from ...domain.entities.user import IdentityClaim


class PasswordHasher(ABC):
    """Interface for password hashing service."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a plain text password with a fresh random salt.

        Raises:
            HashingException: if the credential cannot be produced.
        """
        pass

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against its hash. Errors count as a mismatch."""
        pass


class TokenService(ABC):
    """Interface for signed identity token service."""

    @abstractmethod
    def sign(self, claim: IdentityClaim, ttl: timedelta) -> str:
        """Sign a token carrying claim that expires after ttl."""
        pass

    @abstractmethod
    def verify(self, token: str) -> IdentityClaim:
        """
        Verify a token and return its claim.

        Raises:
            TokenVerificationException: if the token is malformed, has a bad
                signature or has expired.
        """
        pass

    @abstractmethod
    def create_access_token(self, claim: IdentityClaim) -> str:
        """Sign a short-lived access token."""
        pass

    @abstractmethod
    def create_refresh_token(self, claim: IdentityClaim) -> str:
        """Sign a long-lived refresh token."""
        pass
