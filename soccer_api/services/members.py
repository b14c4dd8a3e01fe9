import logging
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..config import COMMUNITY_ADMIN_ROLE, COMMUNITY_MODERATOR_ROLE
from ..errors import DuplicateResource, Forbidden, NotFound
from ..models.community import Community, Member
from ..models.role import Role
from ..models.user import User
from ..schemas import MemberCreate
from .authorization import has_community_role, require_seeded_roles

logger = logging.getLogger(__name__)


def add_member(db: Session, requester_id: str, payload: MemberCreate) -> Member:
    """Add a user to a community. Only a Community Admin of that community may do this."""
    require_seeded_roles(db, [COMMUNITY_ADMIN_ROLE], "Admin role not found")

    if not has_community_role(db, payload.community, requester_id, [COMMUNITY_ADMIN_ROLE]):
        raise Forbidden()

    existing = db.exec(
        select(Member).where(
            Member.community_id == payload.community,
            Member.user_id == payload.user
        )
    ).first()
    if existing:
        raise DuplicateResource("User is already a member of this community")

    if not db.get(User, payload.user):
        raise NotFound("User not found")
    if not db.get(Role, payload.role):
        raise NotFound("Role not found")

    member = Member(community_id=payload.community, user_id=payload.user, role_id=payload.role)
    db.add(member)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateResource("User is already a member of this community") from exc
    db.refresh(member)

    logger.info("User %s added %s to community %s", requester_id, payload.user, payload.community)
    return member


def remove_member(db: Session, requester_id: str, membership_id: str) -> Dict[str, Any]:
    """Remove a membership. Admins and moderators of the community may do this."""
    membership = db.get(Member, membership_id)
    if not membership:
        raise NotFound("MEMBER_NOT_FOUND")

    role_names = [COMMUNITY_ADMIN_ROLE, COMMUNITY_MODERATOR_ROLE]
    require_seeded_roles(db, role_names, "Admin or Moderator role not found")

    if not has_community_role(db, membership.community_id, requester_id, role_names):
        raise Forbidden()

    community = db.get(Community, membership.community_id)
    removed = {
        **membership.model_dump(),
        "community": community.model_dump() if community else None,
    }

    db.delete(membership)
    db.commit()

    logger.info("User %s removed membership %s", requester_id, membership_id)
    return removed
