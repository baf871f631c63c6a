from sqlmodel.ext.asyncio.session import AsyncSession

from level.adapter.repositories.open_invitation_repository import OpenInvitationRepository
from level.adapter.repositories.space_repository import SpaceRepository
from level.adapter.repositories.space_user_repository import SpaceUserRepository
from level.adapter.repositories.team_repository import TeamRepository
from level.adapter.repositories.user_repository import UserRepository
from level.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.teams = TeamRepository(self.session)
        self.users = UserRepository(self.session)
        self.spaces = SpaceRepository(self.session)
        self.space_users = SpaceUserRepository(self.session)
        self.open_invitations = OpenInvitationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
