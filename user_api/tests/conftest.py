"""
Shared pytest fixtures for User Accounts API tests.

Provides fixtures for:
- Settings with a test signing secret
- Security services (bcrypt at minimum cost, JWT)
- In-memory unit of work
- API client (httpx)
- Test data factories
"""
import os
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from user_api.app.config import AppSettings, JWTSettings, SecuritySettings
from user_api.app.domain.entities.user import IdentityClaim
from user_api.app.infrastructure.security import BcryptPasswordHasher, JWTHandler

from .factories import RegistrationFactory, UserFactory
from .fakes import InMemoryUnitOfWork

TEST_SECRET = "test-signing-secret-for-user-api-0123456789"
OTHER_SECRET = "another-signing-secret-not-shared-0123456789"
TEST_BCRYPT_ROUNDS = 4

# Test environment configuration
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET_KEY", TEST_SECRET)


# ============================================================================
# Settings / Security Fixtures
# ============================================================================

@pytest.fixture
def settings() -> AppSettings:
    """Application settings for tests."""
    return AppSettings(
        environment="test",
        log_level="WARNING",
        jwt=JWTSettings(secret_key=TEST_SECRET),
        security=SecuritySettings(bcrypt_rounds=TEST_BCRYPT_ROUNDS),
    )


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """bcrypt hasher at the lowest cost so tests stay fast."""
    return BcryptPasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def jwt_handler() -> JWTHandler:
    """JWT handler signing with the test secret."""
    return JWTHandler(secret_key=TEST_SECRET)


@pytest.fixture
def sample_claim() -> IdentityClaim:
    """Identity claim for an arbitrary account."""
    return IdentityClaim(
        subject_id="6f1c2a9e-3b7d-4c52-9a0e-1d2b3c4d5e6f",
        display_name="Dan Han",
    )


# ============================================================================
# Persistence Fixtures
# ============================================================================

@pytest.fixture
def uow() -> InMemoryUnitOfWork:
    """In-memory unit of work shared by a test and its app."""
    return InMemoryUnitOfWork()


# ============================================================================
# API Client Fixtures
# ============================================================================

@pytest.fixture
def app(settings, uow):
    """
    Application under test.

    The unit of work dependency is overridden so no database is needed.
    Lifespan (init_db) is not run by the ASGI transport.
    """
    from user_api.app.api.dependencies import get_unit_of_work
    from user_api.app.main import create_app

    application = create_app(settings)

    async def override_unit_of_work() -> AsyncGenerator[InMemoryUnitOfWork, None]:
        async with uow:
            yield uow

    application.dependency_overrides[get_unit_of_work] = override_unit_of_work

    yield application

    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api_client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Test API client over the ASGI transport."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def registered_user(api_client):
    """
    Register an account through the API.

    Returns (request body, response JSON).
    """
    body = RegistrationFactory()
    response = await api_client.post("/api/v1/users/register", json=body)
    assert response.status_code == 201, response.text
    return body, response.json()


@pytest.fixture
def auth_headers(registered_user):
    """Bearer header carrying the registered user's access token."""
    _, data = registered_user
    return {"Authorization": f"Bearer {data['accessToken']}"}


# ============================================================================
# Test Data Fixtures
# ============================================================================

@pytest.fixture
def registration_data():
    """Registration request body."""
    return RegistrationFactory()


@pytest.fixture
def sample_user():
    """Stored user entity."""
    return UserFactory()


# ============================================================================
# Utility Fixtures
# ============================================================================

@pytest.fixture
def freeze_time():
    """
    Fixture for freezing time in tests.

    Usage:
        def test_something(freeze_time):
            with freeze_time("2026-01-15 12:00:00"):
                # time is frozen
    """
    from freezegun import freeze_time as _freeze_time
    return _freeze_time
