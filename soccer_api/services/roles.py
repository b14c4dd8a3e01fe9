import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..errors import DuplicateResource, NotFound
from ..models.role import Permission, Role, RolePermission
from ..schemas import CreateRoleRequest, parse

logger = logging.getLogger(__name__)


def _permissions_for(db: Session, role_ids: List[str]) -> Dict[str, List[Permission]]:
    """Map each role id to its permissions, in one query."""
    by_role: Dict[str, List[Permission]] = {role_id: [] for role_id in role_ids}
    if not role_ids:
        return by_role

    statement = (
        select(RolePermission.role_id, Permission)
        .join(Permission, Permission.id == RolePermission.permission_id)
        .where(RolePermission.role_id.in_(role_ids))
        .order_by(Permission.category, Permission.name)
    )
    for role_id, permission in db.exec(statement).all():
        by_role[role_id].append(permission)
    return by_role


def _role_with_permissions(role: Role, permissions: List[Permission]) -> Dict[str, Any]:
    return {
        **role.model_dump(),
        "permissions": [permission.model_dump() for permission in permissions],
    }


def create_role(db: Session, name: str, description: Optional[str] = None) -> Dict[str, Any]:
    """Create a role. Uniqueness of the name is left to the database constraint."""
    payload = parse(CreateRoleRequest, {"name": name, "description": description})

    role = Role(name=payload.name, description=payload.description)
    db.add(role)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateResource(f"Role '{payload.name}' already exists") from exc
    db.refresh(role)

    logger.info("Created role %s (%s)", role.name, role.id)
    return _role_with_permissions(role, [])


def get_all_roles(db: Session) -> List[Dict[str, Any]]:
    roles = db.exec(select(Role).order_by(Role.name)).all()
    permissions = _permissions_for(db, [role.id for role in roles])
    return [_role_with_permissions(role, permissions[role.id]) for role in roles]


def get_role_by_id(db: Session, role_id: str) -> Dict[str, Any]:
    role = db.get(Role, role_id)
    if not role:
        raise NotFound("Role not found")
    return _role_with_permissions(role, _permissions_for(db, [role.id])[role.id])


def get_role_by_name(db: Session, name: str) -> Optional[Role]:
    return db.exec(select(Role).where(Role.name == name)).first()


def get_all_permissions(db: Session) -> List[Permission]:
    """All permissions ordered by category, then name."""
    statement = select(Permission).order_by(Permission.category, Permission.name)
    return db.exec(statement).all()


def assign_permission_to_role(db: Session, role_id: str, permission_id: str) -> RolePermission:
    if not db.get(Role, role_id):
        raise NotFound("Role not found")
    if not db.get(Permission, permission_id):
        raise NotFound("Permission not found")

    link = RolePermission(role_id=role_id, permission_id=permission_id)
    db.add(link)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateResource("Permission already assigned to role") from exc
    db.refresh(link)
    return link


def remove_permission_from_role(db: Session, role_id: str, permission_id: str) -> int:
    """Detach a permission from a role, returning how many links were removed."""
    links = db.exec(
        select(RolePermission).where(
            RolePermission.role_id == role_id,
            RolePermission.permission_id == permission_id
        )
    ).all()
    for link in links:
        db.delete(link)
    db.commit()
    return len(links)
