import logging

from sqlalchemy.exc import IntegrityError

from level.api.utils.jwt import generate_jwt
from level.app.services.unit_of_work import UnitOfWork
from level.domain.entities import Team, User, UserRole
from level.domain.teams import team_changeset
from level.domain.users import signup_changeset
from level.result import Result, Return

from ..validation import validation_error
from .dtos import SignupCommand, SignupResponse, TeamInfo, UserInfo

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Creates a team together with its first user, who becomes the OWNER.

    Business Logic:
    1. Validate team params (name, slug)
    2. Validate user params through the signup changeset, which also hashes
       the password and defaults the time zone
    3. Insert team, then user
    4. Map unique index violations back onto the changesets
    5. Commit and return the owner with an access token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        team_cs = team_changeset({}, {"name": command.team_name, "slug": command.team_slug})
        user_params = {**command.user_params(), "role": UserRole.OWNER.value}
        user_cs = signup_changeset({}, user_params)

        if not team_cs.valid or not user_cs.valid:
            team_cs.errors.extend(user_cs.errors)
            return Return.err(validation_error(team_cs))

        async with self.uow:
            try:
                team = await self.uow.teams.create(Team(**team_cs.apply()))
            except IntegrityError as exc:
                if not team_cs.apply_constraint_violation(str(exc.orig)):
                    raise
                return Return.err(validation_error(team_cs))

            user_cs.put_change("team_id", team.id)
            try:
                user = await self.uow.users.create(User(**user_cs.apply()))
            except IntegrityError as exc:
                if not user_cs.apply_constraint_violation(str(exc.orig)):
                    raise
                return Return.err(validation_error(user_cs))

            await self.uow.commit()
            logger.info(f"Signup completed for team {team.slug}")

            access_token = generate_jwt(
                user_id=user.id, team_id=team.id, role=UserRole.OWNER.value
            )
            return Return.ok(
                SignupResponse(
                    user=UserInfo.from_entity(user),
                    team=TeamInfo.from_entity(team),
                    access_token=access_token,
                )
            )
