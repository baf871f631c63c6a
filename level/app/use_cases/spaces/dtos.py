"""
Space Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from level.domain.entities import OpenInvitation, OpenInvitationState, Space

from ..auth.dtos import UserInfo


class OpenInvitationInfo(BaseModel):
    """Open invitation state as seen by space members"""

    id: str
    token: str
    state: OpenInvitationState

    @classmethod
    def from_entity(cls, invitation: OpenInvitation) -> "OpenInvitationInfo":
        return cls(id=str(invitation.id), token=invitation.token, state=invitation.state)


class SpaceInfo(BaseModel):
    """Space information in responses"""

    id: str
    team_id: str
    name: str
    slug: str
    state: str
    open_invitation: Optional[OpenInvitationInfo] = None

    @classmethod
    def from_entity(
        cls, space: Space, invitation: Optional[OpenInvitation] = None
    ) -> "SpaceInfo":
        return cls(
            id=str(space.id),
            team_id=str(space.team_id),
            name=space.name,
            slug=space.slug,
            state=getattr(space.state, "value", space.state),
            open_invitation=(
                OpenInvitationInfo.from_entity(invitation) if invitation else None
            ),
        )


class SpaceUserResponse(BaseModel):
    """A user's membership in a space"""

    id: str
    role: str
    state: str
    space: SpaceInfo
    user: UserInfo


class CreateSpaceCommand(BaseModel):
    name: str
    slug: str


class CreateSpaceResponse(BaseModel):
    space: SpaceInfo
    space_user_id: str


class RevokeOpenInvitationResponse(BaseModel):
    status: str
