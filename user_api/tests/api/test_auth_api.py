"""
API tests for the /auth endpoints and the app-level routes.
"""
import httpx
import pytest
from datetime import timedelta
from unittest.mock import AsyncMock, patch

from user_api.app.domain.entities.user import IdentityClaim
from user_api.app.infrastructure.security import JWTHandler
from user_api.app.main import create_app

from ..conftest import OTHER_SECRET

REFRESH = "/api/v1/auth/refresh"
ME = "/api/v1/auth/me"


def _bearer(token: str):
    return {"Authorization": f"Bearer {token}"}


class TestRefresh:
    """GET /auth/refresh"""

    @pytest.mark.asyncio
    async def test_refresh_returns_new_access_token(self, api_client, registered_user, jwt_handler):
        _, registered = registered_user

        response = await api_client.get(REFRESH, headers=_bearer(registered["refreshToken"]))

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"accessToken"}
        claim = jwt_handler.verify(data["accessToken"])
        assert claim.subject_id == registered["user"]["id"]

    @pytest.mark.asyncio
    async def test_refresh_missing_header(self, api_client):
        response = await api_client.get(REFRESH)

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid Token!"
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_refresh_garbage_token(self, api_client):
        response = await api_client.get(REFRESH, headers=_bearer("not-a-token"))

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid Token!"

    @pytest.mark.asyncio
    async def test_refresh_expired_token(self, api_client, jwt_handler, sample_claim):
        token = jwt_handler.sign(sample_claim, timedelta(seconds=-1))

        response = await api_client.get(REFRESH, headers=_bearer(token))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_refresh_foreign_secret(self, api_client, sample_claim):
        token = JWTHandler(secret_key=OTHER_SECRET).create_refresh_token(sample_claim)

        response = await api_client.get(REFRESH, headers=_bearer(token))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_rejection_reasons_look_identical(self, api_client, jwt_handler, sample_claim):
        """Test clients cannot tell why a token was refused."""
        expired = jwt_handler.sign(sample_claim, timedelta(seconds=-1))
        foreign = JWTHandler(secret_key=OTHER_SECRET).create_access_token(sample_claim)

        bodies = []
        for token in (expired, foreign, "not-a-token"):
            response = await api_client.get(REFRESH, headers=_bearer(token))
            bodies.append(response.json())

        assert bodies[0] == bodies[1] == bodies[2]
        assert "reason" not in bodies[0]


class TestMe:
    """GET /auth/me"""

    @pytest.mark.asyncio
    async def test_me_returns_claim(self, api_client, jwt_handler):
        token = jwt_handler.create_access_token(
            IdentityClaim(subject_id="abc-123", display_name="Dan Han")
        )

        response = await api_client.get(ME, headers=_bearer(token))

        assert response.status_code == 200
        assert response.json() == {"id": "abc-123", "name": "Dan Han"}

    @pytest.mark.asyncio
    async def test_me_requires_token(self, api_client):
        response = await api_client.get(ME)

        assert response.status_code == 401


class TestAppRoutes:
    """GET / and GET /health"""

    @pytest.mark.asyncio
    async def test_root(self, api_client, settings):
        response = await api_client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == settings.app_name

    @pytest.mark.asyncio
    async def test_health_degraded_without_database(self, api_client):
        with patch(
            "user_api.app.infrastructure.database.connection.health_check",
            AsyncMock(return_value=False),
        ):
            response = await api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["services"]["database"] == "down"

    @pytest.mark.asyncio
    async def test_health_ok(self, api_client):
        with patch(
            "user_api.app.infrastructure.database.connection.health_check",
            AsyncMock(return_value=True),
        ):
            response = await api_client.get("/health")

        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_api_prefix_from_settings(self, settings, jwt_handler, sample_claim):
        """Test routes move with the configured prefix."""
        settings.api_prefix = "/svc"
        app = create_app(settings)
        token = jwt_handler.create_access_token(sample_claim)

        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as client:
            moved = await client.get("/svc/v1/auth/me", headers=_bearer(token))
            old = await client.get(ME, headers=_bearer(token))

        assert moved.status_code == 200
        assert moved.json()["id"] == sample_claim.subject_id
        assert old.status_code == 404
