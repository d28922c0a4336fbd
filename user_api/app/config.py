"""
Configuration management for the User Accounts API.

Uses Pydantic settings for validation and environment variable support.
Settings are loaded once, explicitly, when the application starts; nothing in
the package reads the environment at import time.
"""
from functools import lru_cache
from typing import List

from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Minimum HMAC key size per algorithm (RFC 7518 section 3.2)
MIN_SECRET_BYTES = {'HS256': 32, 'HS384': 48, 'HS512': 64}


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing or invalid at startup."""


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_prefix='DB_',
        env_file='.env',
        extra='ignore'
    )

    host: str = Field(default='localhost', description='Database host')
    port: int = Field(default=5432, description='Database port')
    name: str = Field(default='user_api', description='Database name')
    user: str = Field(default='postgres', description='Database user')
    password: str = Field(default='postgres', description='Database password')
    pool_size: int = Field(default=5, description='Connection pool size')
    max_overflow: int = Field(default=10, description='Max overflow connections')
    echo_sql: bool = Field(default=False, description='Echo SQL queries')

    @property
    def url(self) -> str:
        """Build database URL."""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class JWTSettings(BaseSettings):
    """
    JWT signing configuration.

    The secret has no default: a deployment must provide JWT_SECRET_KEY.
    """

    model_config = SettingsConfigDict(
        env_prefix='JWT_',
        env_file='.env',
        extra='ignore'
    )

    algorithm: str = Field(default='HS256', description='JWT algorithm')
    secret_key: str = Field(
        ...,
        min_length=1,
        description='Shared secret for signing and verifying tokens'
    )
    access_token_expire_minutes: int = Field(
        default=15,
        gt=0,
        description='Access token lifetime in minutes'
    )
    refresh_token_expire_hours: int = Field(
        default=12,
        gt=0,
        description='Refresh token lifetime in hours'
    )

    @field_validator('algorithm')
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """Only symmetric HMAC algorithms work with a shared secret."""
        allowed = ('HS256', 'HS384', 'HS512')
        if v.upper() not in allowed:
            raise ValueError(f'Algorithm must be one of: {", ".join(allowed)}')
        return v.upper()

    @field_validator('secret_key')
    @classmethod
    def validate_secret_length(cls, v: str, info: ValidationInfo) -> str:
        """HMAC keys must be at least as long as the digest."""
        algorithm = info.data.get('algorithm')
        required = MIN_SECRET_BYTES.get(algorithm)
        if required and len(v.encode('utf-8')) < required:
            raise ValueError(
                f'Secret must be at least {required} bytes for {algorithm}'
            )
        return v


class SecuritySettings(BaseSettings):
    """Password hashing configuration."""

    model_config = SettingsConfigDict(
        env_prefix='SECURITY_',
        env_file='.env',
        extra='ignore'
    )

    bcrypt_rounds: int = Field(
        default=10,
        ge=4,
        le=31,
        description='bcrypt cost factor (log2 of the iteration count)'
    )


class CORSSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(
        env_prefix='CORS_',
        env_file='.env',
        extra='ignore'
    )

    allowed_origins: List[str] = Field(
        default=['http://localhost:3000', 'http://localhost:5173'],
        description='Allowed origins for CORS'
    )
    allow_credentials: bool = Field(default=True)
    allowed_methods: List[str] = Field(default=['*'])
    allowed_headers: List[str] = Field(default=['*'])


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # Application
    app_name: str = Field(default='User Accounts API')
    app_version: str = Field(default='1.0.0')
    debug: bool = Field(default=False)
    environment: str = Field(default='development')  # development, staging, production, test

    # Server
    host: str = Field(default='0.0.0.0')
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    reload: bool = Field(default=False)

    # API
    api_prefix: str = Field(default='/api')

    # Logging
    log_level: str = Field(default='INFO')
    log_format: str = Field(default='text')  # json or text

    # Sub-settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    jwt: JWTSettings = Field(default_factory=JWTSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ('json', 'text'):
            raise ValueError('log_format must be "json" or "text"')
        return v.lower()


def load_settings() -> AppSettings:
    """
    Build and validate settings from the environment.

    Raises:
        ConfigurationError: if a required value (such as JWT_SECRET_KEY) is
            missing or a value fails validation.
    """
    try:
        return AppSettings()
    except ValidationError as e:
        fields = sorted(
            '.'.join(str(part) for part in err['loc'])
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(fields)}"
        ) from e


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get cached application settings.

    The first call performs the startup load; later calls reuse it.
    """
    return load_settings()


def clear_settings_cache() -> None:
    """Forget cached settings so the next access reloads them."""
    get_settings.cache_clear()

