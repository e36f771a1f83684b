"""Tests for registration and login endpoints."""

import jwt
import pytest


@pytest.mark.asyncio
async def test_register(app_client, db):
    response = await app_client.post(
        "/register", json={"username": "alice", "password": "pw1"}
    )
    assert response.status_code == 200
    assert "alice" in response.json()["message"]
    assert db.users.exists("alice")


@pytest.mark.asyncio
async def test_register_duplicate(app_client):
    await app_client.post("/register", json={"username": "alice", "password": "pw1"})
    response = await app_client.post(
        "/register", json={"username": "alice", "password": "pw2"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "User already exists!"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [{}, {"username": "alice"}, {"password": "pw"}, {"username": "", "password": "pw"}],
)
async def test_register_missing_fields(app_client, db, body):
    response = await app_client.post("/register", json=body)
    assert response.status_code == 400
    assert len(db.users) == 0


@pytest.mark.asyncio
async def test_register_without_body(app_client):
    response = await app_client.post("/register")
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_login_sets_session_cookie(app_client, test_settings):
    await app_client.post("/register", json={"username": "alice", "password": "pw1"})
    response = await app_client.post(
        "/login", json={"username": "alice", "password": "pw1"}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["message"] == "User successfully logged in"
    payload = jwt.decode(
        data["accessToken"],
        test_settings.access_token_secret,
        algorithms=["HS256"],
    )
    assert payload["username"] == "alice"
    assert payload["exp"] - payload["iat"] == 3600

    cookie = response.headers["set-cookie"]
    assert cookie.startswith("connect.sid=s%3A")
    assert "HttpOnly" in cookie


@pytest.mark.asyncio
async def test_login_invalid_credentials(app_client):
    await app_client.post("/register", json={"username": "alice", "password": "pw1"})
    response = await app_client.post(
        "/login", json={"username": "alice", "password": "wrong"}
    )
    assert response.status_code == 401
    assert "Invalid" in response.json()["message"]
    assert "set-cookie" not in response.headers


@pytest.mark.asyncio
async def test_login_unknown_user(app_client):
    response = await app_client.post(
        "/login", json={"username": "ghost", "password": "pw"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_missing_fields(app_client):
    response = await app_client.post("/login", json={"username": "alice"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_relogin_reuses_session(alice_client, db):
    assert len(db.sessions) == 1
    response = await alice_client.post(
        "/login", json={"username": "alice", "password": "pw1"}
    )
    assert response.status_code == 200
    assert len(db.sessions) == 1
