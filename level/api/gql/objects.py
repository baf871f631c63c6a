from typing import List, Optional

import strawberry
from strawberry.types import Info

from level.app.use_cases.auth import UserInfo
from level.app.use_cases.spaces import OpenInvitationInfo, SpaceInfo, SpaceUserResponse
from level.domain.open_invitations import open_invitation_url
from level.result import Error


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    email: str
    username: str
    first_name: Optional[str]
    last_name: Optional[str]
    time_zone: Optional[str]
    role: str
    state: str

    @classmethod
    def from_info(cls, user: UserInfo) -> "UserType":
        return cls(
            id=strawberry.ID(user.id),
            email=user.email,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            time_zone=user.time_zone,
            role=user.role,
            state=user.state,
        )


@strawberry.type(name="Space")
class SpaceType:
    id: strawberry.ID
    name: str
    slug: str
    state: str
    open_invitation: strawberry.Private[Optional[OpenInvitationInfo]]

    @strawberry.field(description="Public join link, null unless the open invitation is active")
    def open_invitation_url(self, info: Info) -> Optional[str]:
        return open_invitation_url(self.open_invitation, info.context["config"].BASE_URL)

    @classmethod
    def from_info(cls, space: SpaceInfo) -> "SpaceType":
        return cls(
            id=strawberry.ID(space.id),
            name=space.name,
            slug=space.slug,
            state=space.state,
            open_invitation=space.open_invitation,
        )


@strawberry.type(name="SpaceUser")
class SpaceUserType:
    id: strawberry.ID
    role: str
    state: str
    space: SpaceType
    user: UserType

    @classmethod
    def from_response(cls, space_user: SpaceUserResponse) -> "SpaceUserType":
        return cls(
            id=strawberry.ID(space_user.id),
            role=space_user.role,
            state=space_user.state,
            space=SpaceType.from_info(space_user.space),
            user=UserType.from_info(space_user.user),
        )


@strawberry.type(name="ValidationError")
class ValidationErrorType:
    attribute: str
    message: str


def payload_errors(error: Error) -> List[ValidationErrorType]:
    """Field errors become one entry each; other failures land on ``base``"""
    if error.details:
        return [
            ValidationErrorType(attribute=d["attribute"], message=d["message"])
            for d in error.details
        ]
    return [ValidationErrorType(attribute="base", message=error.message)]


@strawberry.type
class CreateSpacePayload:
    success: bool
    space: Optional[SpaceType] = None
    errors: List[ValidationErrorType] = strawberry.field(default_factory=list)


@strawberry.type
class RevokeOpenInvitationPayload:
    success: bool
    errors: List[ValidationErrorType] = strawberry.field(default_factory=list)
