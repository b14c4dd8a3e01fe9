import logging
from typing import Optional

from sqlmodel import Session, select

from ..auth import create_access_token, hash_password, verify_password
from ..errors import DuplicateResource, InvalidCredentials, NotFound
from ..models.user import User
from ..schemas import SignupRequest, parse

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get a user by email."""
    statement = select(User).where(User.email == email.lower())
    return db.exec(statement).first()


def _auth_result(user: User) -> dict:
    return {
        "data": user.public(),
        "meta": {"access_token": create_access_token(user.id)},
    }


def signup(db: Session, name: str, email: str, password: str) -> dict:
    """Register a new user and issue a token."""
    payload = parse(SignupRequest, {"name": name, "email": email, "password": password})

    if get_user_by_email(db, payload.email):
        raise DuplicateResource("User already exists")

    user = User(
        name=payload.name,
        email=payload.email,
        password=hash_password(payload.password)
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return _auth_result(user)


def signin(db: Session, email: str, password: str) -> dict:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        raise NotFound("User not found")

    if not verify_password(password, user.password):
        raise InvalidCredentials("Invalid credentials")

    return _auth_result(user)


def get_user_by_id(db: Session, user_id: str) -> dict:
    """Public profile of a user."""
    user = db.get(User, user_id)
    if not user:
        raise NotFound("User not found")
    return user.public()
