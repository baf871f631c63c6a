"""
Open Invitation Use Cases
"""

from .get_open_invitation_use_case import GetOpenInvitationUseCase
from .accept_open_invitation_use_case import AcceptOpenInvitationUseCase
from .dtos import (
    AcceptInvitationCommand,
    AcceptInvitationResponse,
    InvitationSpaceInfo,
    OpenInvitationResponse,
)

__all__ = [
    # Use Cases
    "GetOpenInvitationUseCase",
    "AcceptOpenInvitationUseCase",
    # DTOs
    "AcceptInvitationCommand",
    "AcceptInvitationResponse",
    "InvitationSpaceInfo",
    "OpenInvitationResponse",
]
