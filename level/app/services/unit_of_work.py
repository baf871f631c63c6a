from abc import ABC, abstractmethod

from level.app.repositories.open_invitation_repository import IOpenInvitationRepository
from level.app.repositories.space_repository import ISpaceRepository
from level.app.repositories.space_user_repository import ISpaceUserRepository
from level.app.repositories.team_repository import ITeamRepository
from level.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    teams: ITeamRepository
    users: IUserRepository
    spaces: ISpaceRepository
    space_users: ISpaceUserRepository
    open_invitations: IOpenInvitationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
