"""
Email value object with validation.
"""
import re
from dataclasses import dataclass

from ..exceptions import ValidationException


@dataclass(frozen=True)
class Email:
    """
    Email address value object.

    Immutable, normalized to lowercase and validated on construction.
    Accounts are looked up by the normalized form.
    """
    value: str

    EMAIL_REGEX = re.compile(
        r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    )
    MAX_LENGTH = 254

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationException(
                message="Email cannot be empty",
                errors={'email': ['Email address is required']}
            )

        object.__setattr__(self, 'value', self.normalize(self.value))

        if len(self.value) > self.MAX_LENGTH:
            raise ValidationException(
                message="Email too long",
                errors={'email': [f'Email address cannot exceed {self.MAX_LENGTH} characters']}
            )

        if not self.EMAIL_REGEX.match(self.value):
            raise ValidationException(
                message="Invalid email format",
                errors={'email': [f"'{self.value}' is not a valid email address"]}
            )

    @staticmethod
    def normalize(raw: str) -> str:
        """Trim and lowercase an address without validating it."""
        return raw.strip().lower()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
