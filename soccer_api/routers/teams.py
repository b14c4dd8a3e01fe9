from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..models.user import User
from ..responses import envelope
from ..schemas import TeamCreate, TeamDelete, TeamUpdate
from ..services import teams as team_service

router = APIRouter(prefix="/v1/team", tags=["teams"])


@router.post("")
async def create_team(
    payload: TeamCreate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Create a team owned by the current user."""
    return envelope(team_service.create_team(db, current_user.id, payload))


@router.get("")
async def list_teams(db: Session = Depends(get_session)):
    return envelope(team_service.get_all_teams(db))


@router.get("/me/owner")
async def my_owned_teams(
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    return envelope(team_service.get_my_owned_teams(db, current_user.id))


@router.get("/me/player")
async def my_teams_as_player(
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Teams the current user plays for, with the role held in each."""
    return envelope(team_service.get_my_teams_as_player(db, current_user.id))


@router.get("/{team_id}/players")
async def team_players(team_id: str, db: Session = Depends(get_session)):
    return envelope(team_service.get_team_players(db, team_id))


@router.put("")
async def update_team(
    payload: TeamUpdate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Update a team. Only its owner may do this."""
    team = team_service.update_team(db, current_user.id, payload.team_id, payload.changes())
    return envelope(team)


@router.delete("")
async def delete_team(
    payload: TeamDelete,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Delete a team together with its players. Only its owner may do this."""
    return envelope(team_service.delete_team(db, current_user.id, payload.team_id))
