import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so 'src' is importable during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("MONGO_DISABLED", "1")
os.environ.setdefault("JWT_SECRET", "test-secret")
# lowest cost bcrypt accepts, keeps the suite fast
os.environ.setdefault("BCRYPT_ROUNDS", "4")


@pytest.fixture(scope="session")
def app():
    # lazy import after env configured
    from src.main import create_app

    return create_app()


@pytest.fixture(scope="session")
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture(autouse=True)
def clean_store():
    from src.infrastructure.database.mongo_client import clear_memory_collections

    clear_memory_collections()
    yield
    clear_memory_collections()


@pytest.fixture()
def register(client):
    """Register a user and return (headers, user_id)."""

    def _register(name: str = "Jane Doe", email: str = "jane@mail.com", password: str = "secret1"):
        r = client.post("/api/users", json={"name": name, "email": email, "password": password})
        assert r.status_code == 200, r.text
        headers = {"x-auth-token": r.json()["token"]}
        me = client.get("/api/auth", headers=headers)
        assert me.status_code == 200, me.text
        return headers, me.json()["id"]

    return _register
