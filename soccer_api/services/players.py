import logging
from datetime import datetime, UTC
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..errors import DuplicateResource, NotFound
from ..models.role import Role
from ..models.team import Player, Team
from ..schemas import PlayerCreate

logger = logging.getLogger(__name__)


def _player_with_team_and_role(db: Session, player: Player) -> Dict[str, Any]:
    team = db.get(Team, player.team_id)
    role = db.get(Role, player.role_id)
    return {
        **player.model_dump(),
        "team": team.model_dump() if team else None,
        "role": role.model_dump() if role else None,
    }


def _commit_player(db: Session, player: Player) -> None:
    """Commit, reporting a roster uniqueness clash as a conflict."""
    db.add(player)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateResource("Player or jersey number already exists in team") from exc
    db.refresh(player)


def add_player_to_team(db: Session, user_id: str, payload: PlayerCreate) -> Dict[str, Any]:
    """Add the caller to a team's roster."""
    if not db.get(Team, payload.team_id):
        raise NotFound("Team not found")
    if not db.get(Role, payload.role_id):
        raise NotFound("Role not found")

    existing = db.exec(
        select(Player).where(
            Player.team_id == payload.team_id,
            Player.user_id == user_id
        )
    ).first()
    if existing:
        raise DuplicateResource("Player already exists in team")

    player = Player(
        team_id=payload.team_id,
        user_id=user_id,
        role_id=payload.role_id,
        position=payload.position,
        jersey_number=payload.jersey_number
    )
    _commit_player(db, player)

    logger.info("User %s joined team %s as player %s", user_id, payload.team_id, player.id)
    return _player_with_team_and_role(db, player)


def update_player(db: Session, user_id: str, player_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    """Update the caller's own player record.

    A missing player and a player owned by someone else produce the same
    NotFound error.
    """
    player = db.exec(
        select(Player).where(Player.id == player_id, Player.user_id == user_id)
    ).first()
    if not player:
        raise NotFound("Player not found or not authorized")

    if "role_id" in fields and fields["role_id"] is not None and not db.get(Role, fields["role_id"]):
        raise NotFound("Role not found")

    for key, value in fields.items():
        if value is not None:
            setattr(player, key, value)
    player.updated_at = datetime.now(UTC)

    _commit_player(db, player)
    return _player_with_team_and_role(db, player)
