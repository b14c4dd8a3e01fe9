from sqlmodel import select

from soccer_api.models import Community, Member, Role


def create_community(client, headers, name="Sunday League"):
    response = client.post("/v1/community", json={"name": name}, headers=headers)
    assert response.status_code == 201
    return response.json()["content"]["data"]


def test_create_community_makes_owner_admin(client, session, user, headers, roles):
    community = create_community(client, headers, "Manchester United!")

    assert community["slug"] == "manchester-united"
    assert community["owner_id"] == user.id

    membership = session.exec(select(Member).where(Member.community_id == community["id"])).one()
    assert membership.user_id == user.id
    assert membership.role_id == roles["Community Admin"].id


def test_create_community_without_admin_role(client, session, headers):
    session.add(Role(name="Player"))
    session.commit()

    response = client.post("/v1/community", json={"name": "Sunday League"}, headers=headers)

    assert response.status_code == 500
    assert response.json() == {"status": False, "error": "Community Admin role not found"}
    assert session.exec(select(Community)).all() == []
    assert session.exec(select(Member)).all() == []


def test_create_community_slug_collision(client, session, headers, roles):
    create_community(client, headers, "Sunday League")

    response = client.post("/v1/community", json={"name": "sunday league"}, headers=headers)

    assert response.status_code == 409
    assert len(session.exec(select(Community)).all()) == 1
    assert len(session.exec(select(Member)).all()) == 1


def test_create_community_validation(client, headers, roles):
    response = client.post("/v1/community", json={"name": "x"}, headers=headers)
    assert response.status_code == 400


def test_list_communities_paginated(client, headers, user, roles):
    for number in range(12):
        create_community(client, headers, f"Club {number}")

    first = client.get("/v1/community").json()["content"]
    second = client.get("/v1/community?page=2").json()["content"]

    assert first["meta"] == {"total": 12, "pages": 2, "page": 1}
    assert len(first["data"]) == 10
    assert first["data"][0]["owner"] == {"id": user.id, "name": user.name}
    assert second["meta"]["page"] == 2
    assert len(second["data"]) == 2


def test_invalid_page_falls_back_to_first(client, headers, roles):
    create_community(client, headers)

    content = client.get("/v1/community?page=abc").json()["content"]

    assert content["meta"]["page"] == 1
    assert len(content["data"]) == 1


def test_page_beyond_integer_range_is_empty(client, headers, roles):
    create_community(client, headers)

    response = client.get("/v1/community?page=99999999999999999999")

    assert response.status_code == 200
    content = response.json()["content"]
    assert content["data"] == []
    assert content["meta"]["total"] == 1


def test_community_members(client, headers, user, roles):
    community = create_community(client, headers)

    response = client.get(f"/v1/community/{community['slug']}/members")

    assert response.status_code == 200
    content = response.json()["content"]
    assert content["meta"] == {"total": 1, "pages": 1, "page": 1}
    assert content["data"][0]["user"] == {"id": user.id, "name": user.name}
    assert content["data"][0]["role"]["name"] == "Community Admin"


def test_community_members_unknown_slug(client):
    response = client.get("/v1/community/nope/members")
    assert response.status_code == 404


def test_my_owned_and_joined_communities(client, session, user, headers, make_user, auth_headers, roles):
    owned = create_community(client, headers, "Owned Club")
    other = make_user("other@example.com")
    elsewhere = create_community(client, auth_headers(other), "Other Club")
    session.add(Member(community_id=elsewhere["id"], user_id=user.id, role_id=roles["Community Member"].id))
    session.commit()

    mine = client.get("/v1/community/me/owner", headers=headers).json()["content"]
    joined = client.get("/v1/community/me/member", headers=headers).json()["content"]

    assert [c["id"] for c in mine["data"]] == [owned["id"]]
    assert mine["meta"]["total"] == 1
    assert sorted(c["id"] for c in joined["data"]) == sorted([owned["id"], elsewhere["id"]])
    assert joined["meta"]["total"] == 2
