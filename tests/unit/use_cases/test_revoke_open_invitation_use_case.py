from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from level.app.use_cases.spaces import RevokeOpenInvitationUseCase
from level.domain.entities import (
    OpenInvitation,
    OpenInvitationState,
    SpaceUser,
    SpaceUserRole,
)


@pytest.fixture
def ids():
    return {"user_id": uuid4(), "space_id": uuid4()}


@pytest.fixture
def invitation(ids):
    return OpenInvitation(
        id=uuid4(), space_id=ids["space_id"], token="abc123", state=OpenInvitationState.ACTIVE
    )


@pytest.fixture
def mock_uow(mock_uow, ids, invitation):
    mock_uow.space_users = MagicMock()
    mock_uow.space_users.get_by_space_and_user = AsyncMock(
        return_value=SpaceUser(
            id=uuid4(),
            space_id=ids["space_id"],
            user_id=ids["user_id"],
            role=SpaceUserRole.OWNER,
        )
    )
    mock_uow.open_invitations = MagicMock()
    mock_uow.open_invitations.get_by_space_id = AsyncMock(return_value=invitation)
    mock_uow.open_invitations.update = AsyncMock(side_effect=lambda inv: inv)
    return mock_uow


@pytest.mark.asyncio
async def test_successful_revoke(mock_uow, ids, invitation):
    """An owner moves the open invitation from ACTIVE to REVOKED"""
    result = await RevokeOpenInvitationUseCase(mock_uow).execute(
        ids["user_id"], ids["space_id"]
    )

    assert result.is_ok()
    assert result.value.status == "revoked"
    assert invitation.state == OpenInvitationState.REVOKED
    mock_uow.open_invitations.update.assert_called_once_with(invitation)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_admin_can_revoke(mock_uow, ids):
    mock_uow.space_users.get_by_space_and_user.return_value.role = SpaceUserRole.ADMIN

    result = await RevokeOpenInvitationUseCase(mock_uow).execute(
        ids["user_id"], ids["space_id"]
    )

    assert result.is_ok()


@pytest.mark.asyncio
async def test_member_cannot_revoke(mock_uow, ids, invitation):
    mock_uow.space_users.get_by_space_and_user.return_value.role = SpaceUserRole.MEMBER

    result = await RevokeOpenInvitationUseCase(mock_uow).execute(
        ids["user_id"], ids["space_id"]
    )

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    assert invitation.state == OpenInvitationState.ACTIVE
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_non_member_cannot_revoke(mock_uow, ids):
    mock_uow.space_users.get_by_space_and_user.return_value = None

    result = await RevokeOpenInvitationUseCase(mock_uow).execute(
        ids["user_id"], ids["space_id"]
    )

    assert result.is_err()
    assert result.error.code == "NOT_A_MEMBER"


@pytest.mark.asyncio
async def test_revoke_is_one_way(mock_uow, ids, invitation):
    invitation.state = OpenInvitationState.REVOKED

    result = await RevokeOpenInvitationUseCase(mock_uow).execute(
        ids["user_id"], ids["space_id"]
    )

    assert result.is_err()
    assert result.error.code == "INVITATION_ALREADY_REVOKED"
    mock_uow.open_invitations.update.assert_not_called()


@pytest.mark.asyncio
async def test_revoke_without_invitation(mock_uow, ids):
    mock_uow.open_invitations.get_by_space_id.return_value = None

    result = await RevokeOpenInvitationUseCase(mock_uow).execute(
        ids["user_id"], ids["space_id"]
    )

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"
