import logging

from level.api.utils.jwt import generate_jwt
from level.app.services.unit_of_work import UnitOfWork
from level.domain.entities import UserState
from level.domain.users import verify_password
from level.result import Error, Result, Return

from .dtos import LoginResponse, UserInfo

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Login Use Case

    Users are addressed by team slug and email, since emails are only
    unique within a team.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, team_slug: str, email: str, password: str
    ) -> Result[LoginResponse]:
        async with self.uow:
            team = await self.uow.teams.get_by_slug(team_slug)
            if team is None:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid team, email or password")
                )

            user = await self.uow.users.get_by_team_and_email(team.id, email)
            if user is None or not verify_password(password, user.password_hash):
                logger.warning(f"Failed login attempt for team {team_slug}")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid team, email or password")
                )

            if user.state == UserState.DISABLED:
                return Return.err(Error("USER_DISABLED", "User account is disabled"))

            access_token = generate_jwt(
                user_id=user.id, team_id=team.id, role=UserInfo.from_entity(user).role
            )
            return Return.ok(
                LoginResponse(user=UserInfo.from_entity(user), access_token=access_token)
            )
