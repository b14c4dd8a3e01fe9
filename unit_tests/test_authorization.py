import pytest
from sqlmodel import Session

from soccer_api.errors import InternalError
from soccer_api.models import Community, Member
from soccer_api.services.authorization import has_community_role, require_seeded_roles


def test_has_community_role(session: Session, make_user, roles):
    owner = make_user("owner@example.com")
    moderator = make_user("mod@example.com")
    outsider = make_user("outsider@example.com")
    community = Community(name="Club", slug="club", owner_id=owner.id)
    session.add(community)
    session.commit()
    session.add(Member(community_id=community.id, user_id=owner.id, role_id=roles["Community Admin"].id))
    session.add(Member(community_id=community.id, user_id=moderator.id, role_id=roles["Community Moderator"].id))
    session.commit()

    admin_only = ["Community Admin"]
    staff = ["Community Admin", "Community Moderator"]
    assert has_community_role(session, community.id, owner.id, admin_only)
    assert not has_community_role(session, community.id, moderator.id, admin_only)
    assert has_community_role(session, community.id, moderator.id, staff)
    assert not has_community_role(session, community.id, outsider.id, staff)
    assert not has_community_role(session, "other-community", owner.id, staff)


def test_require_seeded_roles(session: Session, roles):
    found = require_seeded_roles(session, ["Community Admin", "Unknown"], "missing")
    assert [role.name for role in found] == ["Community Admin"]

    with pytest.raises(InternalError, match="nothing here"):
        require_seeded_roles(session, ["Unknown"], "nothing here")
