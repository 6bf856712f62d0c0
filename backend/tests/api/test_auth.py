"""Tests for signup/signin endpoints."""
from httpx import AsyncClient


async def test__signup__returns_access_token(anon_client: AsyncClient) -> None:
    """Signup returns 201 with an access token."""
    response = await anon_client.post(
        "/api/auth/signup",
        json={"email": "new@example.com", "password": "pw"},
    )
    assert response.status_code == 201
    assert set(response.json()) == {"access_token"}


async def test__signin__after_signup_returns_access_token(anon_client: AsyncClient) -> None:
    """The credentials used at signup sign in successfully."""
    await anon_client.post(
        "/api/auth/signup",
        json={"email": "new@example.com", "password": "pw"},
    )
    response = await anon_client.post(
        "/api/auth/signin",
        json={"email": "new@example.com", "password": "pw"},
    )
    assert response.status_code == 200
    assert response.json()["access_token"]


async def test__signup__duplicate_email_is_forbidden(anon_client: AsyncClient) -> None:
    """A second signup for the same email is rejected with 403."""
    body = {"email": "dup@example.com", "password": "pw"}
    first = await anon_client.post("/api/auth/signup", json=body)
    assert first.status_code == 201

    second = await anon_client.post("/api/auth/signup", json=body)
    assert second.status_code == 403
    assert second.json() == {"detail": "Credentials taken"}

    # First account still works
    signin = await anon_client.post("/api/auth/signin", json=body)
    assert signin.status_code == 200


async def test__signin__failures_are_indistinguishable(anon_client: AsyncClient) -> None:
    """Unknown email and wrong password give the same status and body."""
    await anon_client.post(
        "/api/auth/signup",
        json={"email": "real@example.com", "password": "right"},
    )

    unknown = await anon_client.post(
        "/api/auth/signin",
        json={"email": "ghost@example.com", "password": "right"},
    )
    wrong = await anon_client.post(
        "/api/auth/signin",
        json={"email": "real@example.com", "password": "wrong"},
    )

    assert unknown.status_code == wrong.status_code == 403
    assert unknown.json() == wrong.json() == {"detail": "Invalid credentials"}


async def test__signup__invalid_email_rejected(anon_client: AsyncClient) -> None:
    """Request validation rejects a malformed email."""
    response = await anon_client.post(
        "/api/auth/signup",
        json={"email": "not-an-email", "password": "pw"},
    )
    assert response.status_code == 422


async def test__signup__empty_password_rejected(anon_client: AsyncClient) -> None:
    """Request validation rejects an empty password."""
    response = await anon_client.post(
        "/api/auth/signup",
        json={"email": "new@example.com", "password": ""},
    )
    assert response.status_code == 422


async def test__signup__unknown_fields_ignored(anon_client: AsyncClient) -> None:
    """Extra fields in the body are dropped, not rejected."""
    response = await anon_client.post(
        "/api/auth/signup",
        json={"email": "new@example.com", "password": "pw", "is_admin": True},
    )
    assert response.status_code == 201
