from uuid import UUID

from level.app.services.unit_of_work import UnitOfWork
from level.domain.entities import UserState
from level.result import Error, Result, Return

from .dtos import UserInfo


class GetViewerUseCase:
    """Load the authenticated user; disabled users are treated as unknown."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or user.state == UserState.DISABLED:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            return Return.ok(UserInfo.from_entity(user))
