from typing import Optional
from fastapi import Request, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from .auth import verify_bearer
from .database import get_session
from .errors import InvalidToken
from .models.user import User

# Registered so the docs offer bearer authentication; the header itself is checked below
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> str:
    """User id embedded in the request's bearer token."""
    return verify_bearer(request.headers.get("Authorization"))


async def require_user(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_session)
) -> User:
    """Require a token whose user still exists."""
    user = db.get(User, user_id)
    if not user:
        raise InvalidToken("User not found")
    return user
