import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Keep the application's own engine off the on-disk database.
os.environ.setdefault("DATABASE_URL", "sqlite://")

from ddd_forum.database import Base, get_db  # noqa: E402
from ddd_forum.main import app  # noqa: E402
from ddd_forum.models import User  # noqa: E402
from ddd_forum.repository import UserRepository  # noqa: E402
from ddd_forum.security import hash_password  # noqa: E402
from ddd_forum.services import UserService  # noqa: E402

# In-memory SQLite database shared across connections via StaticPool.
TEST_DATABASE_URL = "sqlite://"

FACTORY_PASSWORD_HASH = hash_password("not-a-real-password")


engine_test = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine_test,
)


@pytest.fixture()
def db_session():
    """Provide a fresh test database session for each test.

    The schema is dropped and recreated for every test function,
    ensuring complete isolation between tests.
    """
    Base.metadata.drop_all(bind=engine_test)
    Base.metadata.create_all(bind=engine_test)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(db_session):
    """FastAPI TestClient that uses the in-memory test database."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def user_service(db_session):
    return UserService(UserRepository(db_session))


@pytest.fixture()
def user_factory(db_session):
    """Factory fixture that creates users directly in the test database."""

    def _create_user(
        email: str,
        username: str,
        first_name: str = "Test",
        last_name: str = "User",
    ) -> User:
        user = User(
            email=email,
            username=username,
            first_name=first_name,
            last_name=last_name,
            password_hash=FACTORY_PASSWORD_HASH,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create_user


@pytest.fixture()
def user_payload():
    return {
        "email": "alice@example.com",
        "username": "alice",
        "firstName": "Alice",
        "lastName": "Example",
    }
