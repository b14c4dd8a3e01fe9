from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from ..config import AUTH_RATE_LIMIT
from ..database import get_session
from ..dependencies import get_current_user_id
from ..responses import envelope
from ..schemas import SignupRequest, SigninRequest
from ..services import auth as auth_service
from ..rate_limit import limiter

router = APIRouter(prefix="/v1/auth", tags=["auth"])


@router.post("/signup")
@limiter.limit(AUTH_RATE_LIMIT)
async def signup(
    request: Request,
    payload: SignupRequest,
    db: Session = Depends(get_session)
):
    """Register a user and return an access token."""
    result = auth_service.signup(db, payload.name, payload.email, payload.password)
    return envelope(result["data"], result["meta"])


@router.post("/signin")
@limiter.limit(AUTH_RATE_LIMIT)
async def signin(
    request: Request,
    payload: SigninRequest,
    db: Session = Depends(get_session)
):
    """Exchange email and password for an access token."""
    result = auth_service.signin(db, payload.email, payload.password)
    return envelope(result["data"], result["meta"])


@router.get("/me")
async def me(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_session)
):
    """Profile of the authenticated user."""
    return envelope(auth_service.get_user_by_id(db, user_id))
