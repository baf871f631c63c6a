"""
Revoke Open Invitation Use Case

Handles revoking the open invitation link of a space.
"""

import logging
from uuid import UUID

from level.app.services.unit_of_work import UnitOfWork
from level.domain.entities import OpenInvitationState, SpaceUserRole
from level.result import Error, Result, Return

from .dtos import RevokeOpenInvitationResponse

logger = logging.getLogger(__name__)


class RevokeOpenInvitationUseCase:
    """
    Use case for revoking a space's open invitation.

    Business Rules:
    - Only space owners and admins can revoke
    - ACTIVE -> REVOKED is one-way; revoking twice fails
    - Once revoked, the invitation URL is no longer exposed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, space_id: UUID
    ) -> Result[RevokeOpenInvitationResponse]:
        """
        Execute revoke open invitation use case.

        Args:
            user_id: User ID of the person revoking the invitation
            space_id: Space whose open invitation is revoked

        Returns:
            Result with RevokeOpenInvitationResponse DTO, or Error
        """
        async with self.uow:
            space_user = await self.uow.space_users.get_by_space_and_user(
                space_id, user_id
            )
            if space_user is None:
                return Return.err(
                    Error("NOT_A_MEMBER", "You are not a member of this space")
                )

            if space_user.role not in (SpaceUserRole.OWNER, SpaceUserRole.ADMIN):
                return Return.err(
                    Error(
                        "INSUFFICIENT_ROLE",
                        "Only owners and admins can revoke invitations",
                    )
                )

            invitation = await self.uow.open_invitations.get_by_space_id(space_id)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if invitation.state == OpenInvitationState.REVOKED:
                return Return.err(
                    Error(
                        "INVITATION_ALREADY_REVOKED",
                        "The open invitation has already been revoked",
                    )
                )

            invitation.state = OpenInvitationState.REVOKED
            await self.uow.open_invitations.update(invitation)

            await self.uow.commit()
            logger.info(f"Open invitation {invitation.id} revoked by {user_id}")

            return Return.ok(RevokeOpenInvitationResponse(status="revoked"))
