"""
Space Use Cases
"""

from .create_space_use_case import CreateSpaceUseCase
from .get_space_user_use_case import GetSpaceUserUseCase
from .revoke_open_invitation_use_case import RevokeOpenInvitationUseCase
from .dtos import (
    CreateSpaceCommand,
    CreateSpaceResponse,
    OpenInvitationInfo,
    RevokeOpenInvitationResponse,
    SpaceInfo,
    SpaceUserResponse,
)

__all__ = [
    # Use Cases
    "CreateSpaceUseCase",
    "GetSpaceUserUseCase",
    "RevokeOpenInvitationUseCase",
    # DTOs
    "CreateSpaceCommand",
    "CreateSpaceResponse",
    "OpenInvitationInfo",
    "RevokeOpenInvitationResponse",
    "SpaceInfo",
    "SpaceUserResponse",
]
