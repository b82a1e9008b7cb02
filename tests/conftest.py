import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# Base SQLite pour les tests, AVANT d'importer l'app (Settings lit l'env à l'import)
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

import pytest
from fastapi.testclient import TestClient

from taskmanager.core.database import Base, SessionLocal, engine, init_db
from taskmanager.main import app
from taskmanager.models.user import User


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Client de test FastAPI"""
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def make_user(db):
    """Factory: crée un utilisateur directement en base"""
    def _make_user(email="owner@example.com", name="Owner", password="pass123"):
        user = User(email=email, name=name)
        user.set_password(password)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def other_user(make_user):
    return make_user(email="intruder@example.com", name="Intruder")


@pytest.fixture
def register(client):
    """Inscrit un utilisateur via l'API et retourne les headers Authorization"""
    def _register(email="test@example.com", name="Test User", password="pass123"):
        response = client.post(
            "/api/auth/register",
            json={"email": email, "name": name, "password": password},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _register


@pytest.fixture
def auth_headers(register):
    return register()
