import os

# Settings are read once; pin them before the application is imported
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from main import app
from app.core.config import Settings, get_settings
from app.core.rate_limiter import limiter
from app.database.core import Base, get_db

from factories import make_user, login, bearer

# Use an in-memory SQLite database for testing
TEST_SQLALCHEMY_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def test_settings():
    return Settings(
        database_url=TEST_SQLALCHEMY_DATABASE_URL,
        jwt_secret="test-secret",
        bcrypt_rounds=4,
    )


@pytest.fixture(scope="function")
def db_session():
    """
    Creates a new, isolated in-memory database session for each test.
    """
    engine = create_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session, test_settings):
    """
    Creates a TestClient for the app with the database and settings overridden.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    limiter.enabled = False

    with TestClient(app) as test_client:
        yield test_client

    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_user(db_session):
    """An active user whose password is TEST_PASSWORD."""
    return make_user(db_session)


@pytest.fixture(scope="function")
def other_user(db_session):
    return make_user(db_session, username="bob", email="bob@shop.io")


@pytest.fixture(scope="function")
def auth_headers(client, test_user):
    """
    Logs in the `test_user` and returns valid authorization headers.
    """
    response = login(client, test_user.email)
    assert response.status_code == 200, "Failed to log in test user for auth_headers"

    return bearer(response.json()["data"]["token"])
