from .user import User
from .role import Role, Permission, RolePermission
from .team import Team, Player
from .community import Community, Member

__all__ = [
    "User",
    "Role",
    "Permission",
    "RolePermission",
    "Team",
    "Player",
    "Community",
    "Member",
]
