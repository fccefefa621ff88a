from datetime import timedelta

from app.auth_util import create_access_token, get_password_hash, verify_password
from tests.conftest import register


def test_password_hash_roundtrip():
    hashed = get_password_hash("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_register_returns_token_and_camel_case_user(client):
    body = register(client)
    assert body["tokenType"] == "bearer"
    assert body["accessToken"]
    user = body["user"]
    assert user["email"] == "ada@buildu.org"
    assert user["firstName"] == "Ada"
    assert user["lastName"] == "Lovelace"
    assert user["employmentStatus"] == "seeking"
    assert "hashedPassword" not in user and "hashed_password" not in user


def test_register_duplicate_email(client):
    register(client)
    res = client.post("/auth/register", json={
        "email": "ADA@buildu.org", "password": "secret123", "firstName": "A", "lastName": "L",
    })
    assert res.status_code == 400
    assert res.json()["detail"] == "Email has already been registered"


def test_register_validates_fields(client):
    res = client.post("/auth/register", json={"email": "ada@buildu.org", "password": "123"})
    assert res.status_code == 422


def test_login_and_me(client):
    register(client)
    res = client.post("/auth/login", json={"email": "ada@buildu.org", "password": "secret123"})
    assert res.status_code == 200
    token = res.json()["accessToken"]

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["firstName"] == "Ada"


def test_login_wrong_password(client):
    register(client)
    res = client.post("/auth/login", json={"email": "ada@buildu.org", "password": "nope-nope"})
    assert res.status_code == 401


def test_login_unknown_email(client):
    res = client.post("/auth/login", json={"email": "nobody@buildu.org", "password": "secret123"})
    assert res.status_code == 401


def test_missing_token(client):
    res = client.get("/auth/me")
    assert res.status_code == 401
    assert res.json()["detail"] == "Access token required"


def test_garbage_token(client):
    res = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Invalid or expired token"


def test_expired_token(client, settings, auth):
    _, user = auth
    token = create_access_token(
        subject=user["id"], email=user["email"], first_name=user["firstName"],
        settings=settings, expires_delta=timedelta(minutes=-5),
    )
    res = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_token_for_deleted_user(client, settings):
    token = create_access_token(
        subject="missing-user", email="ghost@buildu.org", first_name="Ghost", settings=settings,
    )
    res = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_logout(client, auth):
    headers, _ = auth
    res = client.post("/auth/logout", headers=headers)
    assert res.status_code == 200
    assert res.json() == {"message": "Logout successful"}
