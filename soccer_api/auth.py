from datetime import datetime, timedelta, UTC
from typing import Optional

import bcrypt
import jwt

from . import config
from .errors import InvalidToken


def _password_bytes(password: str) -> bytes:
    # Bcrypt has a 72-byte limit on the password bytes
    password_bytes = password.encode('utf-8')
    if len(password_bytes) > 72:
        password_bytes = password_bytes[:72]
    return password_bytes


def hash_password(password: str) -> str:
    """Hash a password using bcrypt. Truncates to 72 bytes for bcrypt compatibility."""
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt())
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode('utf-8'))


def create_access_token(user_id: str, expires_in: Optional[timedelta] = None) -> str:
    """Issue a signed token embedding the user's id."""
    now = datetime.now(UTC)
    expires_at = now + (expires_in or timedelta(days=config.TOKEN_EXPIRE_DAYS))
    payload = {"id": user_id, "iat": now, "exp": expires_at}
    return jwt.encode(payload, config.require_jwt_secret(), algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> str:
    """Verify a token and return the embedded user id."""
    try:
        payload = jwt.decode(token, config.require_jwt_secret(), algorithms=[config.JWT_ALGORITHM])
    except jwt.PyJWTError as exc:
        raise InvalidToken("Invalid token") from exc

    user_id = payload.get("id")
    if not isinstance(user_id, str) or not user_id:
        raise InvalidToken("Invalid token payload")
    return user_id


def verify_bearer(authorization: Optional[str]) -> str:
    """Extract and verify the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.startswith("Bearer "):
        raise InvalidToken("No token provided")

    token = authorization[len("Bearer "):].strip()
    if not token:
        raise InvalidToken("Invalid token format")

    return decode_access_token(token)
