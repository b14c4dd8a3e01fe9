import logging
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, func, select

from ..config import COMMUNITY_ADMIN_ROLE, PAGE_SIZE
from ..database import transaction
from ..errors import DuplicateResource, InternalError, NotFound
from ..models.community import Community, Member
from ..models.role import Role
from ..models.user import User
from ..schemas import CommunityCreate, parse
from ..utils import generate_slug, total_pages
from .roles import get_role_by_name
from .teams import user_summary

logger = logging.getLogger(__name__)

# Keeps the row offset inside a signed 64-bit SQL integer
MAX_PAGE = (2 ** 63 - 1) // PAGE_SIZE


def normalize_page(page: Any) -> int:
    """Page numbers start at 1; anything unusable falls back to the first page."""
    try:
        page = int(page)
    except (TypeError, ValueError):
        return 1
    if page < 1:
        return 1
    return min(page, MAX_PAGE)


def _paginated(data: List[Any], total: int, page: int) -> Dict[str, Any]:
    return {
        "data": data,
        "meta": {
            "total": total,
            "pages": total_pages(total, PAGE_SIZE),
            "page": page,
        },
    }


def _offset(page: int) -> int:
    return (page - 1) * PAGE_SIZE


def _community_with_owner(community: Community, owner: User | None) -> Dict[str, Any]:
    return {**community.model_dump(), "owner": user_summary(owner)}


def create_community(db: Session, owner_id: str, name: str) -> Community:
    """Create a community and make its owner a Community Admin, atomically."""
    payload = parse(CommunityCreate, {"name": name})
    slug = generate_slug(payload.name)

    try:
        with transaction(db):
            admin_role = get_role_by_name(db, COMMUNITY_ADMIN_ROLE)
            if not admin_role:
                raise InternalError("Community Admin role not found")

            community = Community(name=payload.name, slug=slug, owner_id=owner_id)
            db.add(community)
            db.flush()

            db.add(Member(community_id=community.id, user_id=owner_id, role_id=admin_role.id))
    except IntegrityError as exc:
        raise DuplicateResource(f"Community with slug '{slug}' already exists") from exc

    db.refresh(community)
    logger.info("User %s created community %s (%s)", owner_id, community.id, slug)
    return community


def get_all_communities(db: Session, page: Any = 1) -> Dict[str, Any]:
    page = normalize_page(page)
    total = db.exec(select(func.count(Community.id))).one()
    statement = (
        select(Community, User)
        .join(User, User.id == Community.owner_id)
        .order_by(Community.created_at)
        .offset(_offset(page))
        .limit(PAGE_SIZE)
    )
    data = [_community_with_owner(community, owner) for community, owner in db.exec(statement).all()]
    return _paginated(data, total, page)


def get_community_members(db: Session, slug: str, page: Any = 1) -> Dict[str, Any]:
    """Members of the community identified by ``slug``, each with user id/name and role."""
    page = normalize_page(page)
    community = db.exec(select(Community).where(Community.slug == slug)).first()
    if not community:
        raise NotFound("Community not found")

    total = db.exec(
        select(func.count(Member.id)).where(Member.community_id == community.id)
    ).one()
    statement = (
        select(Member, User, Role)
        .join(User, User.id == Member.user_id)
        .join(Role, Role.id == Member.role_id)
        .where(Member.community_id == community.id)
        .order_by(Member.created_at)
        .offset(_offset(page))
        .limit(PAGE_SIZE)
    )
    data = [
        {**member.model_dump(), "user": user_summary(user), "role": {"id": role.id, "name": role.name}}
        for member, user, role in db.exec(statement).all()
    ]
    return _paginated(data, total, page)


def get_my_owned_communities(db: Session, owner_id: str, page: Any = 1) -> Dict[str, Any]:
    page = normalize_page(page)
    total = db.exec(
        select(func.count(Community.id)).where(Community.owner_id == owner_id)
    ).one()
    statement = (
        select(Community)
        .where(Community.owner_id == owner_id)
        .order_by(Community.created_at)
        .offset(_offset(page))
        .limit(PAGE_SIZE)
    )
    return _paginated(db.exec(statement).all(), total, page)


def get_my_joined_communities(db: Session, user_id: str, page: Any = 1) -> Dict[str, Any]:
    """Communities the user is a member of, owned ones included."""
    page = normalize_page(page)
    total = db.exec(select(func.count(Member.id)).where(Member.user_id == user_id)).one()
    statement = (
        select(Community, User)
        .join(Member, Member.community_id == Community.id)
        .join(User, User.id == Community.owner_id)
        .where(Member.user_id == user_id)
        .order_by(Member.created_at)
        .offset(_offset(page))
        .limit(PAGE_SIZE)
    )
    data = [_community_with_owner(community, owner) for community, owner in db.exec(statement).all()]
    return _paginated(data, total, page)
