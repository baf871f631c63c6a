from uuid import UUID

from level.app.services.unit_of_work import UnitOfWork
from level.result import Error, Result, Return

from ..auth.dtos import UserInfo
from .dtos import SpaceInfo, SpaceUserResponse


class GetSpaceUserUseCase:
    """
    Load the caller's membership in a space, with the space and its open
    invitation. Non-members get SPACE_NOT_FOUND so space ids are not leaked.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, space_id: UUID) -> Result[SpaceUserResponse]:
        async with self.uow:
            space_user = await self.uow.space_users.get_by_space_and_user(
                space_id, user_id
            )
            if space_user is None:
                return Return.err(Error("SPACE_NOT_FOUND", "Space not found"))

            space = await self.uow.spaces.get_by_id(space_id)
            user = await self.uow.users.get_by_id(user_id)
            if space is None or user is None:
                return Return.err(Error("SPACE_NOT_FOUND", "Space not found"))

            invitation = await self.uow.open_invitations.get_by_space_id(space_id)

            return Return.ok(
                SpaceUserResponse(
                    id=str(space_user.id),
                    role=space_user.role.value,
                    state=space_user.state.value,
                    space=SpaceInfo.from_entity(space, invitation),
                    user=UserInfo.from_entity(user),
                )
            )
