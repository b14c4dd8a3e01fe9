import logging
from datetime import datetime, UTC
from typing import Any, Dict, List

from sqlmodel import Session, select

from ..database import transaction
from ..errors import Forbidden, NotFound
from ..models.role import Role
from ..models.team import Player, Team
from ..models.user import User
from ..schemas import TeamCreate

logger = logging.getLogger(__name__)


def user_summary(user: User | None) -> Dict[str, Any] | None:
    if user is None:
        return None
    return {"id": user.id, "name": user.name}


def create_team(db: Session, owner_id: str, payload: TeamCreate) -> Team:
    """Create a team owned by the caller. Team names are not required to be unique."""
    team = Team(
        name=payload.name,
        location=payload.location,
        league=payload.league,
        founded=payload.founded,
        owner_id=owner_id
    )
    db.add(team)
    db.commit()
    db.refresh(team)

    logger.info("User %s created team %s", owner_id, team.id)
    return team


def get_all_teams(db: Session) -> List[Dict[str, Any]]:
    """All teams with their owner's id and name."""
    statement = select(Team, User).join(User, User.id == Team.owner_id).order_by(Team.created_at)
    return [
        {**team.model_dump(), "owner": user_summary(owner)}
        for team, owner in db.exec(statement).all()
    ]


def get_my_owned_teams(db: Session, owner_id: str) -> List[Team]:
    statement = select(Team).where(Team.owner_id == owner_id).order_by(Team.created_at)
    return db.exec(statement).all()


def get_my_teams_as_player(db: Session, user_id: str) -> List[Dict[str, Any]]:
    """Player rows of a user, each with its team and role."""
    statement = (
        select(Player, Team, Role)
        .join(Team, Team.id == Player.team_id)
        .join(Role, Role.id == Player.role_id)
        .where(Player.user_id == user_id)
        .order_by(Player.created_at)
    )
    return [
        {**player.model_dump(), "team": team.model_dump(), "role": role.model_dump()}
        for player, team, role in db.exec(statement).all()
    ]


def get_team_players(db: Session, team_id: str) -> List[Dict[str, Any]]:
    """Roster of a team, each player with the user's id/name and the role."""
    statement = (
        select(Player, User, Role)
        .join(User, User.id == Player.user_id)
        .join(Role, Role.id == Player.role_id)
        .where(Player.team_id == team_id)
        .order_by(Player.created_at)
    )
    return [
        {**player.model_dump(), "user": user_summary(user), "role": role.model_dump()}
        for player, user, role in db.exec(statement).all()
    ]


def get_owned_team(db: Session, caller_id: str, team_id: str) -> Team:
    """Load a team, requiring the caller to be its owner."""
    team = db.get(Team, team_id)
    if not team:
        raise NotFound("Team not found")
    if team.owner_id != caller_id:
        raise Forbidden("Only the team owner can modify this team")
    return team


def update_team(db: Session, caller_id: str, team_id: str, fields: Dict[str, Any]) -> Team:
    """Apply a partial update to a team owned by the caller."""
    team = get_owned_team(db, caller_id, team_id)

    for key, value in fields.items():
        if value is not None:
            setattr(team, key, value)
    team.updated_at = datetime.now(UTC)

    db.add(team)
    db.commit()
    db.refresh(team)
    return team


def delete_team(db: Session, caller_id: str, team_id: str) -> Dict[str, Any]:
    """Delete a team and its players as one unit of work."""
    team = get_owned_team(db, caller_id, team_id)
    deleted = team.model_dump()

    with transaction(db):
        players = db.exec(select(Player).where(Player.team_id == team.id)).all()
        for player in players:
            db.delete(player)
        # Players must be gone before the team row
        db.flush()
        db.delete(team)

    logger.info("User %s deleted team %s", caller_id, team_id)
    return deleted
