"""
User domain entity and the identity claim carried in tokens.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import Entity
from ..value_objects.email import Email
from ..exceptions import ValidationException


@dataclass
class User(Entity):
    """
    User account.

    Holds the login email, a display name and the stored credential.
    password_hash is always the output of the password hasher, never
    a plaintext password.
    """
    email: Optional[Email] = None
    password_hash: str = ''
    name: str = ''

    MAX_NAME_LENGTH = 100

    def __post_init__(self) -> None:
        """Validate user data on construction."""
        if isinstance(self.email, str):
            self.email = Email(self.email)
        self._validate()

    def _validate(self) -> None:
        errors = {}

        if self.email is None:
            errors['email'] = ['Email address is required']

        if not self.name or not self.name.strip():
            errors['name'] = ['Name is required']
        elif len(self.name) > self.MAX_NAME_LENGTH:
            errors['name'] = [f'Name cannot exceed {self.MAX_NAME_LENGTH} characters']

        if not self.password_hash:
            errors['password'] = ['Password credential is required']

        if errors:
            raise ValidationException(
                message="Invalid user data",
                errors=errors
            )

    def update_profile(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> None:
        """
        Update profile fields.

        Only name and email can change here; the credential is replaced
        through its own flow.
        """
        if name is not None:
            self.name = name.strip()
        if email is not None:
            self.email = Email(email)

        self._validate()
        self.mark_updated()

    @classmethod
    def create(
        cls,
        email: str,
        password_hash: str,
        name: str,
    ) -> 'User':
        """
        Factory method to create a new user.

        Args:
            email: User's email address
            password_hash: Credential produced by the password hasher
            name: Display name

        Returns:
            New User instance
        """
        return cls(
            email=Email(email),
            password_hash=password_hash,
            name=name.strip() if name else name,
        )


@dataclass(frozen=True)
class IdentityClaim:
    """
    Identity embedded in a token.

    On the wire the fields are named "id" and "name".
    """
    subject_id: str
    display_name: str

    @classmethod
    def for_user(cls, user: User) -> 'IdentityClaim':
        """Build the claim for an existing account."""
        return cls(subject_id=str(user.id), display_name=user.name)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to token payload fields."""
        return {'id': self.subject_id, 'name': self.display_name}

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'IdentityClaim':
        """
        Build from decoded token payload.

        Raises:
            ValueError: if the payload does not carry a usable identity.
        """
        subject_id = payload.get('id')
        display_name = payload.get('name')
        if not isinstance(subject_id, str) or not subject_id:
            raise ValueError("Token payload has no subject id")
        if not isinstance(display_name, str):
            raise ValueError("Token payload has no display name")
        return cls(subject_id=subject_id, display_name=display_name)
