"""Community-scoped role checks shared by the membership operations."""
from typing import Iterable, List

from sqlmodel import Session, select

from ..errors import InternalError
from ..models.community import Member
from ..models.role import Role


def require_seeded_roles(db: Session, role_names: Iterable[str], message: str) -> List[Role]:
    """Return the named roles that exist, failing when none of them were seeded."""
    roles = db.exec(select(Role).where(Role.name.in_(list(role_names)))).all()
    if not roles:
        raise InternalError(message)
    return roles


def has_community_role(db: Session, community_id: str, user_id: str, role_names: Iterable[str]) -> bool:
    """Whether the user's membership in the community carries one of the named roles."""
    statement = (
        select(Member.id)
        .join(Role, Role.id == Member.role_id)
        .where(
            Member.community_id == community_id,
            Member.user_id == user_id,
            Role.name.in_(list(role_names))
        )
    )
    return db.exec(statement).first() is not None
