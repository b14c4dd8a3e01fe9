from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..models.user import User
from ..responses import envelope
from ..schemas import MemberCreate
from ..services import members as member_service

router = APIRouter(prefix="/v1/member", tags=["members"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_member(
    payload: MemberCreate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Add a user to a community. Requires the Community Admin role there."""
    return envelope(member_service.add_member(db, current_user.id, payload))


@router.delete("/{membership_id}")
async def remove_member(
    membership_id: str,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Remove a membership. Requires the Community Admin or Moderator role there."""
    return envelope(member_service.remove_member(db, current_user.id, membership_id))
