from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..models.user import User
from ..responses import envelope, list_envelope
from ..schemas import AssignPermissionRequest, CreateRoleRequest
from ..services import roles as role_service

router = APIRouter(prefix="/v1/role", tags=["roles"])


@router.get("")
async def list_roles(db: Session = Depends(get_session)):
    """All roles with their permissions."""
    return list_envelope(role_service.get_all_roles(db))


@router.post("")
async def create_role(
    payload: CreateRoleRequest,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    return envelope(role_service.create_role(db, payload.name, payload.description))


@router.get("/permissions")
async def list_permissions(db: Session = Depends(get_session)):
    """All permissions ordered by category and name."""
    return list_envelope(role_service.get_all_permissions(db))


@router.get("/{role_id}")
async def get_role(role_id: str, db: Session = Depends(get_session)):
    return envelope(role_service.get_role_by_id(db, role_id))


@router.post("/{role_id}/permissions")
async def assign_permission(
    role_id: str,
    payload: AssignPermissionRequest,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    return envelope(role_service.assign_permission_to_role(db, role_id, payload.permission_id))


@router.delete("/{role_id}/permissions/{permission_id}")
async def remove_permission(
    role_id: str,
    permission_id: str,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    removed = role_service.remove_permission_from_role(db, role_id, permission_id)
    return envelope({"removed": removed})
