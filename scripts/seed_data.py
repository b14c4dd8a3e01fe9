"""Seed permissions, roles, sample users, teams and players."""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlmodel import Session, select
from soccer_api.auth import hash_password
from soccer_api.database import engine, create_db_and_tables
from soccer_api.models import (
    Community,
    Member,
    Permission,
    Player,
    Role,
    RolePermission,
    Team,
    User,
)

PERMISSIONS = [
    # name, description, category
    ("team:read", "View team information", "team"),
    ("team:create", "Create new teams", "team"),
    ("team:update", "Update team information", "team"),
    ("team:delete", "Delete teams", "team"),
    ("player:read", "View player information", "player"),
    ("player:create", "Add new players", "player"),
    ("player:update", "Update player information", "player"),
    ("player:delete", "Remove players", "player"),
    ("role:read", "View roles and permissions", "role"),
    ("role:create", "Create new roles", "role"),
    ("admin:all", "Full administrative access", "admin"),
]

ROLES = {
    "Team Manager": (
        "Full team management access",
        ["team:read", "team:create", "team:update", "team:delete",
         "player:read", "player:create", "player:update", "player:delete",
         "role:read", "role:create"],
    ),
    "Head Coach": (
        "Player and tactical management",
        ["team:read", "team:update", "player:read", "player:create", "player:update", "role:read"],
    ),
    "Assistant Coach": (
        "Training and player development",
        ["team:read", "player:read", "player:update", "role:read"],
    ),
    "Team Captain": (
        "Team leadership and communication",
        ["team:read", "player:read", "role:read"],
    ),
    "Player": (
        "Basic team access",
        ["team:read", "player:read", "role:read"],
    ),
    # Community roles; member management depends on these two names
    "Community Admin": (
        "Full control over a community and its members",
        ["admin:all"],
    ),
    "Community Moderator": (
        "Can remove members from a community",
        ["role:read"],
    ),
    "Community Member": (
        "Regular community member",
        ["role:read"],
    ),
}

USERS = [
    {"name": "Alex Ferguson", "email": "alex.ferguson@example.com", "password": "manager123"},
    {"name": "Pep Guardiola", "email": "pep.guardiola@example.com", "password": "coach123"},
    {"name": "Lionel Messi", "email": "lionel.messi@example.com", "password": "player123"},
    {"name": "Cristiano Ronaldo", "email": "cristiano.ronaldo@example.com", "password": "player123"},
]

TEAMS = [
    # owner is an index into USERS
    {"name": "Manchester United", "location": "Manchester, England", "league": "Premier League", "founded": 1878, "owner": 0},
    {"name": "Manchester City", "location": "Manchester, England", "league": "Premier League", "founded": 1880, "owner": 1},
]

PLAYERS = [
    {"team": 0, "user": 2, "role": "Team Captain", "position": "Forward", "jersey_number": 10},
    {"team": 1, "user": 3, "role": "Player", "position": "Forward", "jersey_number": 7},
]


def clear_data(session: Session):
    """Delete everything, children before parents."""
    for model in (Member, Community, RolePermission, Player, Team, Role, Permission, User):
        for row in session.exec(select(model)).all():
            session.delete(row)
        session.flush()
    session.commit()


def seed_roles(session: Session) -> dict[str, Role]:
    """Create permissions and roles with their mappings. Returns roles by name."""
    permissions = {}
    for name, description, category in PERMISSIONS:
        permission = Permission(name=name, description=description, category=category)
        session.add(permission)
        permissions[name] = permission
    session.flush()

    roles = {}
    for name, (description, permission_names) in ROLES.items():
        role = Role(name=name, description=description)
        session.add(role)
        roles[name] = role
        session.flush()
        for permission_name in permission_names:
            session.add(RolePermission(role_id=role.id, permission_id=permissions[permission_name].id))

    session.commit()
    return roles


def seed_sample_data(session: Session, roles: dict[str, Role]):
    users = [
        User(name=data["name"], email=data["email"], password=hash_password(data["password"]))
        for data in USERS
    ]
    session.add_all(users)
    session.flush()

    teams = [
        Team(
            name=data["name"],
            location=data["location"],
            league=data["league"],
            founded=data["founded"],
            owner_id=users[data["owner"]].id
        )
        for data in TEAMS
    ]
    session.add_all(teams)
    session.flush()

    for data in PLAYERS:
        session.add(Player(
            team_id=teams[data["team"]].id,
            user_id=users[data["user"]].id,
            role_id=roles[data["role"]].id,
            position=data["position"],
            jersey_number=data["jersey_number"]
        ))

    session.commit()
    return users, teams


def seed(session: Session):
    roles = seed_roles(session)
    users, teams = seed_sample_data(session, roles)
    print(f"Seeded {len(PERMISSIONS)} permissions, {len(roles)} roles, "
          f"{len(users)} users, {len(teams)} teams, {len(PLAYERS)} players.")


if __name__ == "__main__":
    create_db_and_tables()
    with Session(engine) as session:
        if "--force" in sys.argv:
            clear_data(session)
        elif session.exec(select(Role)).first():
            print("Data already seeded. Use --force to re-seed.")
            sys.exit(0)
        seed(session)
