import re
import uuid


def generate_id() -> str:
    """Generate an application-side primary key."""
    return uuid.uuid4().hex


def generate_slug(name: str) -> str:
    """Convert a display name to a slug (e.g. "Manchester United!" -> "manchester-united")."""
    slug = name.lower().replace(" ", "-")
    return re.sub(r"[^\w-]+", "", slug)


def total_pages(total: int, page_size: int) -> int:
    return -(-total // page_size)
