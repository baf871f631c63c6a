"""
Open Invitation Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from ..auth.dtos import TeamInfo, UserInfo


class InvitationSpaceInfo(BaseModel):
    """What a visitor learns about the space behind an invitation link"""

    id: str
    name: str
    slug: str


class OpenInvitationResponse(BaseModel):
    space: InvitationSpaceInfo
    team: TeamInfo


class AcceptInvitationCommand(BaseModel):
    """
    Accept invitation command - signup params for the new team member
    """

    email: str
    username: str
    password: str
    time_zone: Optional[str] = None


class AcceptInvitationResponse(BaseModel):
    user: UserInfo
    space_id: str
    access_token: str
