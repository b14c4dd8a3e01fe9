from datetime import datetime, UTC
from sqlmodel import SQLModel, Field, UniqueConstraint

from ..utils import generate_id


class Community(SQLModel, table=True):
    __tablename__ = "communities"

    id: str = Field(default_factory=generate_id, primary_key=True)
    name: str
    slug: str = Field(unique=True, index=True)
    owner_id: str = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class Member(SQLModel, table=True):
    __tablename__ = "members"
    __table_args__ = (UniqueConstraint("community_id", "user_id", name="unique_community_user"),)

    id: str = Field(default_factory=generate_id, primary_key=True)
    community_id: str = Field(foreign_key="communities.id", index=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    role_id: str = Field(foreign_key="roles.id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
