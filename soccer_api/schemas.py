"""Request bodies and their validation rules."""
import re
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError as PydanticValidationError,
    field_validator,
)

from .errors import ValidationError

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

# Display names and emails are trimmed; passwords are kept byte for byte
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2)]
TeamName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Email = Annotated[str, StringConstraints(strip_whitespace=True)]


class RequestModel(BaseModel):
    """Accepts both the camelCase keys clients send and the snake_case field names."""
    model_config = ConfigDict(populate_by_name=True)


class SignupRequest(RequestModel):
    """Schema for registering a user."""
    name: Name
    email: Email
    password: str = Field(min_length=6)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("must be a valid email")
        return value.lower()


class SigninRequest(RequestModel):
    email: Email
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()


class CreateRoleRequest(RequestModel):
    """Schema for creating a role."""
    name: Name
    description: Optional[str] = None


class AssignPermissionRequest(RequestModel):
    permission_id: str = Field(alias="permissionId")


class TeamCreate(RequestModel):
    """Schema for creating a team."""
    name: TeamName
    location: str
    league: str
    founded: Optional[int] = None


class TeamUpdate(RequestModel):
    """Schema for a partial team update; only fields sent are applied."""
    team_id: str = Field(alias="teamId")
    name: Optional[TeamName] = None
    location: Optional[str] = None
    league: Optional[str] = None
    founded: Optional[int] = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude={"team_id"})


class TeamDelete(RequestModel):
    team_id: str = Field(alias="teamId")


class PlayerCreate(RequestModel):
    """Schema for joining a team as a player."""
    team_id: str = Field(alias="teamId")
    role_id: str = Field(alias="roleId")
    position: str
    jersey_number: Optional[int] = Field(default=None, alias="jerseyNumber", ge=0)


class PlayerUpdate(RequestModel):
    role_id: Optional[str] = Field(default=None, alias="roleId")
    position: Optional[str] = None
    jersey_number: Optional[int] = Field(default=None, alias="jerseyNumber", ge=0)
    status: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class CommunityCreate(RequestModel):
    """Schema for creating a community."""
    name: Name


class MemberCreate(RequestModel):
    """Schema for adding a member; all three values are ids."""
    community: str
    user: str
    role: str


def format_errors(errors: list[dict]) -> str:
    """Collapse pydantic error details into one readable message."""
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request body"


def parse(model: type[RequestModel], data: dict[str, Any]) -> RequestModel:
    """Validate ``data`` against ``model``, raising the domain ValidationError on failure."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(format_errors(exc.errors())) from exc
