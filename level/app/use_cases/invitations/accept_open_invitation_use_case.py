"""
Accept Open Invitation Use Case

Handles signing a new member up through a space's open invitation link.
"""

import logging

from sqlalchemy.exc import IntegrityError

from level.api.utils.jwt import generate_jwt
from level.app.services.unit_of_work import UnitOfWork
from level.domain.entities import SpaceUser, SpaceUserRole, User, UserRole
from level.domain.open_invitations import is_exposable
from level.domain.users import signup_changeset
from level.result import Error, Result, Return

from ..auth.dtos import UserInfo
from ..validation import validation_error
from .dtos import AcceptInvitationCommand, AcceptInvitationResponse

logger = logging.getLogger(__name__)


class AcceptOpenInvitationUseCase:
    """
    Use case for joining a space through its open invitation.

    Business Rules:
    - The invitation must be ACTIVE
    - The new user joins the space's team as MEMBER
    - Email and username must be unused within that team
    - The new user joins the space as MEMBER
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, token: str, command: AcceptInvitationCommand
    ) -> Result[AcceptInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.open_invitations.get_by_token(token)
            if not is_exposable(invitation):
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            space = await self.uow.spaces.get_by_id(invitation.space_id)

            changeset = signup_changeset(
                {},
                {
                    **command.model_dump(),
                    "team_id": space.team_id,
                    "role": UserRole.MEMBER.value,
                },
            )
            if not changeset.valid:
                return Return.err(validation_error(changeset))

            try:
                user = await self.uow.users.create(User(**changeset.apply()))
            except IntegrityError as exc:
                if not changeset.apply_constraint_violation(str(exc.orig)):
                    raise
                return Return.err(validation_error(changeset))

            await self.uow.space_users.create(
                SpaceUser(space_id=space.id, user_id=user.id, role=SpaceUserRole.MEMBER)
            )

            await self.uow.commit()
            logger.info(f"User {user.id} joined space {space.id} via open invitation")

            access_token = generate_jwt(
                user_id=user.id, team_id=space.team_id, role=UserRole.MEMBER.value
            )
            return Return.ok(
                AcceptInvitationResponse(
                    user=UserInfo.from_entity(user),
                    space_id=str(space.id),
                    access_token=access_token,
                )
            )
