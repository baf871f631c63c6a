"""
Auth Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation. User DTOs never
carry a password or password hash.
"""

from typing import Optional

from pydantic import BaseModel

from level.domain.entities import Team, User


class SignupCommand(BaseModel):
    """
    Signup command - represents signup intent

    Created by API layer after request parsing.
    Field validation happens in the signup changeset.
    """

    team_name: str
    team_slug: str
    email: str
    username: str
    password: str
    time_zone: Optional[str] = None

    def user_params(self) -> dict:
        return self.model_dump(exclude={"team_name", "team_slug"})


class UserInfo(BaseModel):
    """User information in responses"""

    id: str
    team_id: str
    email: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    time_zone: Optional[str] = None
    role: str
    state: str

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            team_id=str(user.team_id),
            email=user.email,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            time_zone=user.time_zone,
            role=_value(user.role),
            state=_value(user.state),
        )


class TeamInfo(BaseModel):
    """Team information in responses"""

    id: str
    name: str
    slug: str

    @classmethod
    def from_entity(cls, team: Team) -> "TeamInfo":
        return cls(id=str(team.id), name=team.name, slug=team.slug)


class SignupResponse(BaseModel):
    """Signup response - new team, its owner and an access token"""

    user: UserInfo
    team: TeamInfo
    access_token: str


class LoginResponse(BaseModel):
    """Login response"""

    user: UserInfo
    access_token: str
    token_type: str = "bearer"


def _value(field) -> str:
    return getattr(field, "value", field)
