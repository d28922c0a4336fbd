"""
JWT token handling implementation.
"""
import logging
from datetime import datetime, timedelta, timezone

import jwt

from ...application.interfaces.services import TokenService
from ...domain.entities.user import IdentityClaim
from ...domain.exceptions import TokenVerificationException

logger = logging.getLogger(__name__)


class JWTHandler(TokenService):
    """
    JWT token service implementation.

    Tokens are compact HMAC-signed JWTs whose payload is the identity
    claim ("id", "name") plus "iat" and "exp". Access and refresh tokens
    differ only in lifetime.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_ttl: timedelta = timedelta(minutes=15),
        refresh_token_ttl: timedelta = timedelta(hours=12),
    ):
        """
        Initialize JWT handler.

        Args:
            secret_key: Shared secret for signing and verifying tokens
            algorithm: HMAC signing algorithm
            access_token_ttl: Access token validity period
            refresh_token_ttl: Refresh token validity period
        """
        if not secret_key:
            raise ValueError("JWT secret key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_token_ttl = access_token_ttl
        self._refresh_token_ttl = refresh_token_ttl

    @property
    def access_token_ttl(self) -> timedelta:
        return self._access_token_ttl

    @property
    def refresh_token_ttl(self) -> timedelta:
        return self._refresh_token_ttl

    def sign(self, claim: IdentityClaim, ttl: timedelta) -> str:
        """Sign a token for claim expiring ttl from now."""
        now = datetime.now(timezone.utc)

        payload = claim.to_payload()
        payload["iat"] = now
        payload["exp"] = now + ttl

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def create_access_token(self, claim: IdentityClaim) -> str:
        """Create a new access token."""
        return self.sign(claim, self._access_token_ttl)

    def create_refresh_token(self, claim: IdentityClaim) -> str:
        """Create a new refresh token."""
        return self.sign(claim, self._refresh_token_ttl)

    def verify(self, token: str) -> IdentityClaim:
        """Verify signature and expiry, then return the embedded claim."""
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise self._reject(TokenVerificationException.EXPIRED)
        except jwt.InvalidSignatureError:
            raise self._reject(TokenVerificationException.BAD_SIGNATURE)
        except jwt.InvalidTokenError:
            raise self._reject(TokenVerificationException.MALFORMED)

        try:
            return IdentityClaim.from_payload(payload)
        except ValueError:
            raise self._reject(TokenVerificationException.MALFORMED)

    def _reject(self, reason: str) -> TokenVerificationException:
        logger.info("Token rejected: %s", reason)
        return TokenVerificationException(reason)
