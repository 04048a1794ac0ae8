import os

# Settings are read at import time and refuse to start without a secret
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.core.database import Base, get_db
from app.core.security import decode_access_token
from main import app

# Test database
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture(scope="function")
def setup_database():
    """Create tables before each test and drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(setup_database):
    return TestClient(app)


@pytest.fixture
def register_user(client):
    """
    Register a user and return its auth headers plus id.

    The session cookie set by the API is cleared afterwards so each request
    authenticates only with what the test passes explicitly.
    """
    def _register(name="Juan Test", email="juan@example.com", password="123456"):
        response = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 201
        client.cookies.clear()
        token = response.json()["token"]
        return {
            "token": token,
            "user_id": decode_access_token(token),
            "headers": {"Authorization": f"Bearer {token}"},
        }

    return _register


@pytest.fixture
def auth_headers(register_user):
    """Get authentication headers."""
    return register_user()["headers"]


@pytest.fixture
def db_session(setup_database):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def clock():
    """A clock pinned to Monday 2025-03-10 09:00 (server local time)."""
    return FakeClock(datetime(2025, 3, 10, 9, 0, 0))
