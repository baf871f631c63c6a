import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from level.app.services.unit_of_work import UnitOfWork
from level.domain.entities import OpenInvitation, Space, SpaceUser, SpaceUserRole
from level.domain.open_invitations import generate_token
from level.domain.spaces import space_changeset
from level.result import Error, Result, Return

from ..validation import validation_error
from .dtos import CreateSpaceCommand, CreateSpaceResponse, SpaceInfo

logger = logging.getLogger(__name__)


class CreateSpaceUseCase:
    """
    Create Space Use Case

    Business Rules:
    - The space belongs to the creator's team
    - The creator becomes the space OWNER
    - Every new space starts with an ACTIVE open invitation
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: CreateSpaceCommand
    ) -> Result[CreateSpaceResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            changeset = space_changeset(
                {}, {**command.model_dump(), "team_id": user.team_id}
            )
            if not changeset.valid:
                return Return.err(validation_error(changeset))

            try:
                space = await self.uow.spaces.create(Space(**changeset.apply()))
            except IntegrityError as exc:
                if not changeset.apply_constraint_violation(str(exc.orig)):
                    raise
                return Return.err(validation_error(changeset))

            space_user = await self.uow.space_users.create(
                SpaceUser(space_id=space.id, user_id=user.id, role=SpaceUserRole.OWNER)
            )
            invitation = await self.uow.open_invitations.create(
                OpenInvitation(space_id=space.id, token=generate_token())
            )

            await self.uow.commit()
            logger.info(f"Space {space.slug} created in team {space.team_id}")

            return Return.ok(
                CreateSpaceResponse(
                    space=SpaceInfo.from_entity(space, invitation),
                    space_user_id=str(space_user.id),
                )
            )
