from datetime import datetime, UTC
from sqlmodel import SQLModel, Field

from ..utils import generate_id


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: str = Field(default_factory=generate_id, primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)
    password: str  # bcrypt hash
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def public(self) -> dict:
        """Fields safe to return to clients."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "created_at": self.created_at,
        }
