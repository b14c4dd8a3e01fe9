import os

# Configure before the application modules read the environment
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-the-soccer-api-suite")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from soccer_api import models  # noqa: F401
from soccer_api.models import Role, User

# Create an in-memory SQLite engine for tests
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session):
    def create_user(email: str = "test@example.com", name: str = "Test User") -> User:
        user = User(name=name, email=email, password="hashed_secret")
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return create_user


@pytest.fixture(name="roles")
def roles_fixture(session: Session) -> dict:
    roles = {}
    for name in ("Player", "Community Admin", "Community Moderator", "Community Member"):
        role = Role(name=name)
        session.add(role)
        roles[name] = role
    session.commit()
    for role in roles.values():
        session.refresh(role)
    return roles
