from fastapi.testclient import TestClient
import pytest

from app.main import app
from app import crud
from app.config.settings import settings

client = TestClient(app)


@pytest.fixture
def admin(db):
    return crud.create_admin(db, "admin", "s3cret-pass", name="Administrator")


def login(username="admin", password="s3cret-pass"):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_login_returns_token(admin):
    r = login()
    assert r.status_code == 200
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]


def test_login_fails_with_wrong_credentials(admin):
    assert login(password="wrong").status_code == 401
    assert login(username="nobody").status_code == 401


def test_me_requires_token(admin):
    assert client.get("/api/auth/me").status_code == 401
    r = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_me_with_token(admin):
    token = login().json()["access_token"]
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["username"] == "admin"
    assert r.json()["last_login_at"] is not None


def test_record_routes_open_when_auth_disabled():
    assert client.get("/api/cutting-records/").status_code == 200


def test_record_routes_require_token_when_enabled(admin, monkeypatch):
    monkeypatch.setattr(settings, "AUTH_REQUIRED", True)
    assert client.get("/api/cutting-records/").status_code == 401

    token = login().json()["access_token"]
    r = client.get("/api/cutting-records/", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200


def test_ensure_default_admin_is_idempotent(db):
    first = crud.ensure_default_admin(db, "owner", "pw")
    second = crud.ensure_default_admin(db, "owner", "other")
    assert first.id == second.id
    assert crud.authenticate_admin(db, "owner", "pw") is not None


def test_health_reports_database():
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["database"] == "reachable"
    assert r.json()["status"] == "healthy"
