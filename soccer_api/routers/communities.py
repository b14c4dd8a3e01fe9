from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..models.user import User
from ..responses import envelope
from ..schemas import CommunityCreate
from ..services import communities as community_service

router = APIRouter(prefix="/v1/community", tags=["communities"])


def _paged(result: dict) -> dict:
    return envelope(result["data"], result["meta"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_community(
    payload: CommunityCreate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Create a community; the creator becomes its Community Admin."""
    return envelope(community_service.create_community(db, current_user.id, payload.name))


@router.get("")
async def list_communities(page: str = "1", db: Session = Depends(get_session)):
    return _paged(community_service.get_all_communities(db, page))


@router.get("/me/owner")
async def my_owned_communities(
    page: str = "1",
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    return _paged(community_service.get_my_owned_communities(db, current_user.id, page))


@router.get("/me/member")
async def my_joined_communities(
    page: str = "1",
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    return _paged(community_service.get_my_joined_communities(db, current_user.id, page))


@router.get("/{slug}/members")
async def community_members(slug: str, page: str = "1", db: Session = Depends(get_session)):
    return _paged(community_service.get_community_members(db, slug, page))
