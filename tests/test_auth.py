from datetime import datetime, timedelta, timezone

from jose import jwt

from taskmanager.core.config import settings
from taskmanager.core.security import create_access_token, decode_token
from taskmanager.models.user import User


# ========== REGISTER ==========
def test_register_success(client, db):
    response = client.post(
        "/api/auth/register",
        json={"email": "Alice@Example.COM", "name": " Alice ", "password": "secret1"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "alice@example.com"
    assert data["name"] == "Alice"
    assert data["tokenType"] == "bearer"
    assert decode_token(data["token"]) == data["userId"]

    user = db.query(User).filter(User.id == data["userId"]).first()
    assert user.password_hash != "secret1"
    assert user.verify_password("secret1")


def test_register_duplicate_email_is_case_insensitive(client, register):
    register(email="bob@example.com")
    response = client.post(
        "/api/auth/register",
        json={"email": "BOB@example.com", "name": "Bob", "password": "pass123"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"
    assert response.json()["code"] == "DUPLICATE"


def test_register_rejects_short_password(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "c@example.com", "name": "C", "password": "123"},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_register_rejects_blank_name(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "c@example.com", "name": "   ", "password": "pass123"},
    )
    assert response.status_code == 400


def test_register_rejects_invalid_email(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "name": "C", "password": "pass123"},
    )
    assert response.status_code == 422


# ========== LOGIN ==========
def test_login_success(client, register):
    register(email="dave@example.com", password="pass123")
    response = client.post(
        "/api/auth/login",
        json={"email": "DAVE@example.com", "password": "pass123"},
    )
    assert response.status_code == 200
    assert response.json()["email"] == "dave@example.com"
    assert response.json()["token"]


def test_login_wrong_password_and_unknown_email_look_the_same(client, register):
    register(email="erin@example.com", password="pass123")

    wrong_password = client.post(
        "/api/auth/login", json={"email": "erin@example.com", "password": "nope123"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "ghost@example.com", "password": "pass123"}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


# ========== TOKENS ==========
def test_protected_route_requires_token(client):
    assert client.get("/api/projects").status_code == 401


def test_protected_route_rejects_garbage_token(client):
    response = client.get("/api/projects", headers={"Authorization": "Bearer invalid_token"})
    assert response.status_code == 401


def test_protected_route_rejects_expired_token(client, user):
    payload = {
        "user_id": user.id,
        "email": user.email,
        "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        "type": "access",
    }
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    response = client.get("/api/projects", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_for_deleted_user_is_rejected(client, db, user):
    token = create_access_token(user.id, user.email)
    db.delete(user)
    db.commit()

    response = client.get("/api/projects", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_health(client):
    response = client.get("/health/z")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
