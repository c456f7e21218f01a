"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from storefront.config import Settings, get_settings
from storefront.database import Base, get_db, make_engine
from storefront.main import app
from storefront.services.security import PasswordHasher, TokenIssuer
from storefront.services.user_store import UserStore


class RegisteredUser(dict):
    """Registration payload that also stores the created user's id."""

    def __init__(self, *args, user_id: int | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/storefront", "/storefront_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = make_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "testpass123"


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    # Import all models so they are registered with Base.metadata
    from storefront import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def test_settings():
    """Settings with a signing secret and a cheap bcrypt cost."""
    return Settings(
        database_url=SQLALCHEMY_DATABASE_URL,
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        environment="test",
    )


@pytest.fixture
def hasher(test_settings):
    return PasswordHasher(rounds=test_settings.bcrypt_rounds)


@pytest.fixture
def tokens(test_settings):
    return TokenIssuer(test_settings)


@pytest.fixture
def store(db, hasher):
    return UserStore(db, hasher)


@pytest.fixture(scope="function")
def client(db, test_settings):
    """Create a test client with database and settings overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register a user through the API; the client keeps the session cookie."""
    payload = {
        "name": "Test User",
        "email": "test@example.com",
        "password": TEST_PASSWORD,
        "confirm_password": TEST_PASSWORD,
    }
    response = client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 201
    user_id = response.json()["data"]["user"]["id"]

    return RegisteredUser(payload, user_id=user_id)
