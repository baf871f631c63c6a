from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select

from level.domain.entities import OpenInvitation, OpenInvitationState

MEMBER = {"email": "tiff@level.app", "username": "tiff", "password": "$ecret$"}


@pytest.mark.asyncio
async def test_show_open_invitation(client: AsyncClient, create_user_and_space):
    setup = await create_user_and_space()

    response = await client.get(f"/invites/{setup['open_invitation'].token}")

    assert response.status_code == 200
    assert response.json()["space"]["name"] == "Bridge"
    assert response.json()["team"]["slug"] == "level"


@pytest.mark.asyncio
async def test_show_unknown_invitation(client: AsyncClient):
    response = await client.get("/invites/nope")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_accept_open_invitation(client: AsyncClient, create_user_and_space, post_graphql):
    setup = await create_user_and_space()
    token = setup["open_invitation"].token

    response = await client.post(f"/invites/{token}/accept", json=MEMBER)

    assert response.status_code == 201
    data = response.json()
    assert data["space_id"] == setup["space"].id
    assert data["user"]["team_id"] == setup["team"].id
    assert data["user"]["role"] == "MEMBER"

    query = "query($id: ID!) { spaceUser(spaceId: $id) { role user { username } } }"
    response = await post_graphql(query, {"id": setup["space"].id}, data["access_token"])
    assert response.json() == {
        "data": {"spaceUser": {"role": "MEMBER", "user": {"username": "tiff"}}}
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "duplicate, attribute",
    [
        ({"username": "tiff2"}, "email"),
        ({"email": "tiff2@level.app"}, "username"),
    ],
)
async def test_email_and_username_unique_within_team(
    client: AsyncClient, create_user_and_space, duplicate, attribute
):
    """
    Given a member already joined the team
    When someone joins with the same email (or username)
    Then the second signup fails with a uniqueness error on that field
    """
    setup = await create_user_and_space()
    token = setup["open_invitation"].token
    first = await client.post(f"/invites/{token}/accept", json=MEMBER)
    assert first.status_code == 201

    response = await client.post(f"/invites/{token}/accept", json={**MEMBER, **duplicate})

    assert response.status_code == 422
    assert response.json()["error"]["details"] == [
        {"attribute": attribute, "message": "has already been taken"}
    ]


@pytest.mark.asyncio
async def test_same_member_can_join_two_teams(client: AsyncClient, create_user_and_space):
    level = await create_user_and_space(team_slug="level")
    other = await create_user_and_space(team_slug="other")

    first = await client.post(f"/invites/{level['open_invitation'].token}/accept", json=MEMBER)
    second = await client.post(f"/invites/{other['open_invitation'].token}/accept", json=MEMBER)

    assert first.status_code == 201
    assert second.status_code == 201


@pytest.mark.asyncio
async def test_accept_revoked_invitation(client: AsyncClient, create_user_and_space, db_session):
    setup = await create_user_and_space()
    stmt = select(OpenInvitation).where(OpenInvitation.id == UUID(setup["open_invitation"].id))
    invitation = (await db_session.exec(stmt)).one()
    invitation.state = OpenInvitationState.REVOKED
    db_session.add(invitation)
    await db_session.commit()

    response = await client.post(f"/invites/{invitation.token}/accept", json=MEMBER)

    assert response.status_code == 404
