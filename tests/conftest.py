import os

# Configure before the application modules read the environment
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-the-soccer-api-suite")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from main import app
from soccer_api.auth import create_access_token, hash_password
from soccer_api.database import get_session
from soccer_api.models import Role, User

# Create in-memory database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session):
    """Factory creating users whose password is "password123"."""
    def create_user(email: str = "test@example.com", name: str = "Test User") -> User:
        user = User(name=name, email=email, password=hash_password("password123"))
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return create_user


@pytest.fixture(name="auth_headers")
def auth_headers_fixture():
    def headers_for(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return headers_for


@pytest.fixture(name="user")
def user_fixture(make_user) -> User:
    return make_user()


@pytest.fixture(name="headers")
def headers_fixture(user: User, auth_headers) -> dict:
    return auth_headers(user)


@pytest.fixture(name="roles")
def roles_fixture(session: Session) -> dict:
    """Seed the team and community roles by name."""
    roles = {}
    for name in ("Player", "Team Captain", "Community Admin", "Community Moderator", "Community Member"):
        role = Role(name=name, description=f"{name} role")
        session.add(role)
        roles[name] = role
    session.commit()
    for role in roles.values():
        session.refresh(role)
    return roles
