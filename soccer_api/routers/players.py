from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..models.user import User
from ..responses import envelope
from ..schemas import PlayerCreate, PlayerUpdate
from ..services import players as player_service

router = APIRouter(prefix="/v1/player", tags=["players"])


@router.post("")
async def add_player_to_team(
    payload: PlayerCreate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Join a team as a player."""
    return envelope(player_service.add_player_to_team(db, current_user.id, payload))


@router.put("/{player_id}")
async def update_player(
    player_id: str,
    payload: PlayerUpdate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Update the current user's own player record."""
    return envelope(player_service.update_player(db, current_user.id, player_id, payload.changes()))
