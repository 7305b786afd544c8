"""Integration tests for /api/auth routes."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_register_returns_token_and_user(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/register",
        json={"name": "Ann", "email": "a@x.com", "password": "p"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["user"]["email"] == "a@x.com"
    assert body["user"]["name"] == "Ann"
    assert "password_hash" not in body["user"]


@pytest.mark.asyncio
async def test_register_duplicate_email_conflicts(client: AsyncClient, register) -> None:
    await register(email="a@x.com")

    response = await client.post(
        "/api/auth/register",
        json={"name": "Again", "email": "a@x.com", "password": "other"},
    )

    assert response.status_code == 409
    assert response.json()["detail"] == "Email already registered"


@pytest.mark.asyncio
async def test_register_rejects_invalid_payload(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/register",
        json={"name": "   ", "email": "not-an-email", "password": ""},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login(client: AsyncClient, register) -> None:
    await register(email="a@x.com", password="p")

    response = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "p"})

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "a@x.com"


@pytest.mark.asyncio
async def test_login_failures_are_indistinguishable(client: AsyncClient, register) -> None:
    await register(email="a@x.com", password="p")

    wrong_password = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "x"})
    unknown_email = await client.post("/api/auth/login", json={"email": "z@x.com", "password": "p"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "Incorrect email or password"}


@pytest.mark.asyncio
async def test_me(client: AsyncClient, register) -> None:
    headers = await register(email="a@x.com", name="Ann")

    response = await client.get("/api/auth/me", headers=headers)

    assert response.status_code == 200
    assert response.json()["name"] == "Ann"


@pytest.mark.asyncio
async def test_me_requires_valid_token(client: AsyncClient) -> None:
    missing = await client.get("/api/auth/me")
    invalid = await client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})

    assert missing.status_code == 401
    assert invalid.status_code == 401
    assert invalid.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_health_and_root(client: AsyncClient) -> None:
    health = await client.get("/health")
    root = await client.get("/")

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert root.json()["message"] == "PDF Annotator API"
