"""Tests for login and bearer token enforcement."""

import pytest
from fastapi.testclient import TestClient

from attraction_dashboard.domain.users import TokenClaims
from attraction_dashboard.services.security import TokenCodec
from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME


def test_login_returns_token_and_user(client: TestClient, tokens: TokenCodec) -> None:
    response = client.post(
        "/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user"] == {"id": 1, "username": ADMIN_USERNAME}
    assert tokens.verify(data["token"]) == TokenClaims(id=1, username=ADMIN_USERNAME)


@pytest.mark.parametrize(
    ("username", "password"),
    [("nobody", ADMIN_PASSWORD), (ADMIN_USERNAME, "wrong-password")],
)
def test_login_failures_are_identical(
    client: TestClient, username: str, password: str
) -> None:
    response = client.post(
        "/api/login", json={"username": username, "password": password}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_login_requires_fields(client: TestClient) -> None:
    response = client.post("/api/login", json={"username": ADMIN_USERNAME})

    assert response.status_code == 400
    assert "password" in response.json()["error"]


def test_protected_route_without_token_is_401(client: TestClient) -> None:
    response = client.get("/api/attractions")

    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}


def test_protected_route_with_bad_token_is_403(client: TestClient) -> None:
    response = client.get(
        "/api/attractions", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert response.status_code == 403
    assert response.json() == {"error": "Invalid token"}


def test_protected_route_with_foreign_token_is_403(client: TestClient) -> None:
    token = TokenCodec(secret="other-secret").issue(
        TokenClaims(id=1, username=ADMIN_USERNAME)
    )

    response = client.get(
        "/api/summary", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 403


def test_protected_route_with_valid_token(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.get("/api/attractions", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == []


def test_health_and_ui_are_public(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}

    page = client.get("/")
    assert page.status_code == 200
    assert "const API = '/api';" in page.text
