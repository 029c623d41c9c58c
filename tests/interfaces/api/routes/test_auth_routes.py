"""Tests for signup, login and session handling."""

from __future__ import annotations


def test_signup_sets_cookie_and_hides_password(client):
    response = client.post(
        "/api/auth/signup",
        json={
            "email": "ana@example.com",
            "password": "Secret123",
            "firstName": "Ana",
            "lastName": "Lopez",
            "role": "patient",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["email"] == "ana@example.com"
    assert body["user"]["role"] == "patient"
    assert body["user"]["isOnboarded"] is False
    assert "passwordHash" not in body["user"]
    assert "harmonia_session" in response.cookies

    current = client.get("/api/auth/user")
    assert current.status_code == 200
    assert current.json()["id"] == body["user"]["id"]


def test_signup_rejects_duplicate_email(client, signup):
    signup("ana@example.com")

    response = client.post(
        "/api/auth/signup",
        json={
            "email": "ANA@example.com",
            "password": "Secret123",
            "firstName": "Ana",
            "lastName": "Lopez",
        },
    )

    assert response.status_code == 400


def test_signup_validates_payload(client):
    response = client.post(
        "/api/auth/signup",
        json={
            "email": "not-an-email",
            "password": "short",
            "firstName": "Ana",
            "lastName": "Lopez",
            "role": "admin",
        },
    )

    assert response.status_code == 422


def test_login_and_logout(client, signup):
    signup("ana@example.com")
    client.cookies.clear()

    bad = client.post(
        "/api/auth/login", json={"email": "ana@example.com", "password": "wrong-pass"}
    )
    assert bad.status_code == 401
    assert bad.json()["detail"] == "Invalid email or password"

    unknown = client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "Secret123"}
    )
    assert unknown.status_code == 401

    good = client.post(
        "/api/auth/login", json={"email": "ana@example.com", "password": "Secret123"}
    )
    assert good.status_code == 200
    token = good.json()["accessToken"]
    assert client.get("/api/auth/user").status_code == 200

    logout = client.post("/api/auth/logout")
    assert logout.status_code == 200
    client.cookies.clear()
    assert client.get("/api/auth/user").status_code == 401
    assert (
        client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"}).status_code
        == 200
    )


def test_invalid_bearer_token_is_rejected(client):
    response = client.get("/api/auth/user", headers={"Authorization": "Bearer nonsense"})
    assert response.status_code == 401
