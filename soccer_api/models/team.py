from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field, UniqueConstraint

from ..utils import generate_id


class Team(SQLModel, table=True):
    __tablename__ = "teams"

    id: str = Field(default_factory=generate_id, primary_key=True)
    name: str = Field(index=True)
    location: str
    league: str
    founded: Optional[int] = Field(default=None)
    owner_id: str = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class Player(SQLModel, table=True):
    """A user's place on a team's roster."""
    __tablename__ = "players"
    __table_args__ = (
        UniqueConstraint("team_id", "user_id", name="unique_team_user"),
        UniqueConstraint("team_id", "jersey_number", name="unique_team_jersey"),
    )

    id: str = Field(default_factory=generate_id, primary_key=True)
    team_id: str = Field(foreign_key="teams.id", index=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    role_id: str = Field(foreign_key="roles.id")
    position: str
    jersey_number: Optional[int] = Field(default=None)
    status: str = Field(default="active")  # active, injured, suspended, inactive
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
