import pytest
from sqlmodel import Session, select

from soccer_api.errors import Forbidden, NotFound
from soccer_api.models import Player, Team
from soccer_api.schemas import TeamCreate
from soccer_api.services import teams as team_service


def test_update_team_applies_only_given_fields(session: Session, make_user):
    owner = make_user()
    team = team_service.create_team(
        session, owner.id, TeamCreate(name="Arsenal", location="London", league="Premier League", founded=1886)
    )
    created_at = team.created_at

    updated = team_service.update_team(session, owner.id, team.id, {"league": "Championship"})

    assert updated.league == "Championship"
    assert updated.name == "Arsenal"
    assert updated.founded == 1886
    assert updated.updated_at >= created_at


def test_update_and_delete_checks(session: Session, make_user):
    owner = make_user("owner@example.com")
    other = make_user("other@example.com")
    team = team_service.create_team(session, owner.id, TeamCreate(name="Leeds", location="Leeds", league="Championship"))

    with pytest.raises(NotFound):
        team_service.update_team(session, owner.id, "missing", {"name": "X"})
    with pytest.raises(Forbidden):
        team_service.update_team(session, other.id, team.id, {"name": "X"})
    with pytest.raises(Forbidden):
        team_service.delete_team(session, other.id, team.id)


def test_delete_team_rolls_back_on_failure(session: Session, make_user, roles, monkeypatch):
    owner = make_user()
    team = team_service.create_team(session, owner.id, TeamCreate(name="Everton", location="Liverpool", league="Premier League"))
    session.add(Player(team_id=team.id, user_id=owner.id, role_id=roles["Player"].id, position="Defender"))
    session.commit()
    team_id = team.id

    original_delete = session.delete

    def failing_delete(instance):
        if isinstance(instance, Team):
            raise RuntimeError("boom")
        original_delete(instance)

    monkeypatch.setattr(session, "delete", failing_delete)
    with pytest.raises(RuntimeError):
        team_service.delete_team(session, owner.id, team_id)
    monkeypatch.undo()

    assert session.get(Team, team_id) is not None
    assert len(session.exec(select(Player).where(Player.team_id == team_id)).all()) == 1
