import pytest
from unittest.mock import AsyncMock, MagicMock

from level.app.repositories.open_invitation_repository import IOpenInvitationRepository
from level.app.repositories.space_repository import ISpaceRepository
from level.app.repositories.space_user_repository import ISpaceUserRepository
from level.app.repositories.team_repository import ITeamRepository
from level.app.repositories.user_repository import IUserRepository
from level.app.services.unit_of_work import UnitOfWork


@pytest.fixture
def mock_uow():
    """
    Unit of work whose repositories follow their interfaces, so a use case
    calling a method that no repository declares fails the test.
    """
    uow = MagicMock(spec=UnitOfWork)
    uow.__aenter__ = AsyncMock(return_value=uow)
    # A falsy return keeps exceptions raised inside the block propagating
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.teams = AsyncMock(spec=ITeamRepository)
    uow.users = AsyncMock(spec=IUserRepository)
    uow.spaces = AsyncMock(spec=ISpaceRepository)
    uow.space_users = AsyncMock(spec=ISpaceUserRepository)
    uow.open_invitations = AsyncMock(spec=IOpenInvitationRepository)
    return uow
