"""
Integration tests for user API routes.

Tests:
- POST /api/v1/users
- GET /api/v1/users/{user_id}
- GET /api/v1/users/{user_id}/accounts
"""

import uuid

import pytest
from httpx import AsyncClient


@pytest.mark.integration
@pytest.mark.asyncio
class TestUserRoutes:
    """Integration tests for user endpoints."""

    async def test_create_user(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/users",
            json={"username": "alice", "email": "alice@example.com"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "alice"
        assert data["email"] == "alice@example.com"
        assert "id" in data

    async def test_create_user_duplicate(self, async_client: AsyncClient, test_user):
        response = await async_client.post(
            "/api/v1/users",
            json={"username": test_user.username, "email": "new@example.com"},
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "ALREADY_EXISTS"

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "ab", "email": "ab@example.com"},
            {"username": "bad name!", "email": "bad@example.com"},
            {"username": "validname", "email": "not-an-email"},
        ],
    )
    async def test_create_user_invalid(self, async_client: AsyncClient, payload):
        response = await async_client.post("/api/v1/users", json=payload)

        assert response.status_code == 422

    async def test_get_user(self, async_client: AsyncClient, test_user):
        response = await async_client.get(f"/api/v1/users/{test_user.id}")

        assert response.status_code == 200
        assert response.json()["username"] == "testuser"

    async def test_get_user_not_found(self, async_client: AsyncClient):
        response = await async_client.get(f"/api/v1/users/{uuid.uuid4()}")

        assert response.status_code == 404

    async def test_list_accounts(
        self, async_client: AsyncClient, test_user, funded_account, blocked_account
    ):
        response = await async_client.get(f"/api/v1/users/{test_user.id}/accounts")

        assert response.status_code == 200
        data = response.json()
        assert {a["id"] for a in data} == {
            str(funded_account.id),
            str(blocked_account.id),
        }
        assert all(a["user_id"] == str(test_user.id) for a in data)

    async def test_list_accounts_empty(self, async_client: AsyncClient):
        response = await async_client.get(f"/api/v1/users/{uuid.uuid4()}/accounts")

        assert response.status_code == 200
        assert response.json() == []
