from level.app.services.unit_of_work import UnitOfWork
from level.domain.open_invitations import is_exposable
from level.result import Error, Result, Return

from ..auth.dtos import TeamInfo
from .dtos import InvitationSpaceInfo, OpenInvitationResponse


class GetOpenInvitationUseCase:
    """Look up the space an open invitation link points at"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[OpenInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.open_invitations.get_by_token(token)
            if not is_exposable(invitation):
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            space = await self.uow.spaces.get_by_id(invitation.space_id)
            team = await self.uow.teams.get_by_id(space.team_id)

            return Return.ok(
                OpenInvitationResponse(
                    space=InvitationSpaceInfo(id=str(space.id), name=space.name, slug=space.slug),
                    team=TeamInfo.from_entity(team),
                )
            )
