import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/soccer.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# Security
JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHM = "HS256"
TOKEN_EXPIRE_DAYS = 1

# Server
PORT = int(os.getenv("PORT", "3000"))
ENVIRONMENT = os.getenv("ENVIRONMENT", "production").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
AUTH_RATE_LIMIT = os.getenv("AUTH_RATE_LIMIT", "10/minute")

# Pagination
PAGE_SIZE = 10

# Seeded role names the community checks depend on
COMMUNITY_ADMIN_ROLE = "Community Admin"
COMMUNITY_MODERATOR_ROLE = "Community Moderator"


def is_development() -> bool:
    return ENVIRONMENT == "development"


def require_jwt_secret() -> str:
    """Return the token signing secret, failing fast when it is not configured."""
    if not JWT_SECRET:
        raise RuntimeError("JWT_SECRET is not defined in environment.")
    return JWT_SECRET
