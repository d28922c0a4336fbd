"""
Authentication application service.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, List

from ..interfaces.services import PasswordHasher, TokenService
from ..interfaces.unit_of_work import UnitOfWork
from ...domain.entities.user import IdentityClaim, User
from ...domain.exceptions import (
    DuplicateEntityException,
    EntityNotFoundException,
    PasswordMismatchException,
    ValidationException,
)
from ...domain.value_objects.email import Email

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    """Account plus the token pair issued for it."""
    user: User
    access_token: str
    refresh_token: str


@dataclass
class RegisterRequest:
    """User registration request data."""
    email: str
    password: str
    confirm_password: str
    name: str


@dataclass
class LoginRequest:
    """User login request data."""
    email: str
    password: str


class AuthService:
    """
    Authentication service handling registration, login and token refresh.

    Hashing and verification run in a worker thread so the event loop
    keeps serving other requests while bcrypt works.
    """

    # bcrypt only reads this many bytes of input
    MAX_PASSWORD_BYTES = 72

    def __init__(
        self,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def register(
        self,
        request: RegisterRequest,
        uow: UnitOfWork,
    ) -> AuthResult:
        """
        Register a new user and issue its first token pair.

        The password is hashed before anything is written; if hashing fails
        the HashingException propagates and nothing is persisted.

        Args:
            request: Registration data
            uow: Unit of work for transaction management

        Returns:
            AuthResult with the stored user and fresh tokens
        """
        self._validate_registration(request)
        email = Email(request.email)

        if await uow.users.email_exists(str(email)):
            raise DuplicateEntityException('User', 'email', str(email))

        password_hash = await asyncio.to_thread(
            self._password_hasher.hash, request.password
        )

        user = User.create(
            email=str(email),
            password_hash=password_hash,
            name=request.name,
        )

        saved_user = await uow.users.add(user)
        await uow.commit()

        logger.info("Registered user %s", saved_user.id)
        return self._issue_tokens(saved_user)

    async def login(
        self,
        request: LoginRequest,
        uow: UnitOfWork,
    ) -> AuthResult:
        """
        Authenticate user and return tokens.

        Args:
            request: Login credentials
            uow: Unit of work for transaction management

        Returns:
            AuthResult with tokens on success

        Raises:
            ValidationException: email or password missing
            EntityNotFoundException: no account for the email
            PasswordMismatchException: wrong password
        """
        if not request.email or not request.password:
            raise ValidationException(message="Email and password required")

        user = await uow.users.get_by_email(request.email)
        if not user:
            raise EntityNotFoundException('User', message="User not found")

        matched = await asyncio.to_thread(
            self._password_hasher.verify, request.password, user.password_hash
        )
        if not matched:
            logger.info("Password mismatch for user %s", user.id)
            raise PasswordMismatchException()

        logger.info("User %s logged in", user.id)
        return self._issue_tokens(user)

    def authenticate(self, token: str) -> IdentityClaim:
        """
        Verify a bearer token and return its claim.

        The account is not looked up again; a structurally valid, unexpired
        token is enough.
        """
        return self._token_service.verify(token)

    def refresh(self, claim: IdentityClaim) -> str:
        """Issue a new access token for an already verified claim."""
        return self._token_service.create_access_token(claim)

    def _issue_tokens(self, user: User) -> AuthResult:
        claim = IdentityClaim.for_user(user)
        return AuthResult(
            user=user,
            access_token=self._token_service.create_access_token(claim),
            refresh_token=self._token_service.create_refresh_token(claim),
        )

    def _validate_registration(self, request: RegisterRequest) -> None:
        errors: Dict[str, List[str]] = {}

        if not request.email:
            errors['email'] = ['Email address is required']
        if not request.password:
            errors['password'] = ['Password is required']
        elif len(request.password.encode('utf-8')) > self.MAX_PASSWORD_BYTES:
            errors['password'] = [
                f'Password cannot exceed {self.MAX_PASSWORD_BYTES} bytes'
            ]
        if not request.name or not request.name.strip():
            errors['name'] = ['Name is required']

        if errors:
            raise ValidationException(message="Invalid registration data", errors=errors)

        if request.password != request.confirm_password:
            raise ValidationException(
                message="Password not the same",
                errors={'confirmPassword': ['Passwords do not match']},
            )
