from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field, UniqueConstraint

from ..utils import generate_id


class Role(SQLModel, table=True):
    """Named permission bundle held by a Player (team scope) or Member (community scope)."""
    __tablename__ = "roles"

    id: str = Field(default_factory=generate_id, primary_key=True)
    name: str = Field(unique=True, index=True)
    description: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class Permission(SQLModel, table=True):
    __tablename__ = "permissions"

    id: str = Field(default_factory=generate_id, primary_key=True)
    name: str = Field(unique=True, index=True)  # e.g. "team:update"
    description: Optional[str] = Field(default=None)
    category: str = Field(index=True)  # team, player, role, admin
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class RolePermission(SQLModel, table=True):
    __tablename__ = "role_permissions"
    __table_args__ = (UniqueConstraint("role_id", "permission_id", name="unique_role_permission"),)

    id: str = Field(default_factory=generate_id, primary_key=True)
    role_id: str = Field(foreign_key="roles.id", index=True)
    permission_id: str = Field(foreign_key="permissions.id", index=True)
