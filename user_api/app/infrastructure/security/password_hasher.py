"""
Password hashing implementation using bcrypt.
"""
import logging

import bcrypt

from ...application.interfaces.services import PasswordHasher
from ...domain.exceptions import HashingException

logger = logging.getLogger(__name__)


class BcryptPasswordHasher(PasswordHasher):
    """
    Bcrypt implementation of password hasher.

    Produces modular-crypt strings ($2b$<cost>$<salt><digest>) so the
    algorithm, cost and salt travel with the digest.
    """

    def __init__(self, rounds: int = 10):
        """
        Initialize hasher with work factor.

        Args:
            rounds: bcrypt cost factor (log2 of iterations)
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt with a new random salt."""
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        except (ValueError, TypeError, OSError) as e:
            logger.error("Password hashing failed: %s", type(e).__name__)
            raise HashingException() from e
        return hashed.decode('utf-8')

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against a hash."""
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
        except (ValueError, TypeError) as e:
            # Reported to the caller as a plain mismatch
            logger.warning("Password verification error: %s", type(e).__name__)
            return False
