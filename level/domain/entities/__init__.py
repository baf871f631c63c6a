"""
Level Domain Entities

All domain entities organized by model.
"""

from .enums import (
    OpenInvitationState,
    SpaceState,
    SpaceUserRole,
    SpaceUserState,
    TeamState,
    UserRole,
    UserState,
)

from .team import Team
from .user import User
from .space import Space
from .space_user import SpaceUser
from .open_invitation import OpenInvitation

__all__ = [
    # Enums
    "OpenInvitationState",
    "SpaceState",
    "SpaceUserRole",
    "SpaceUserState",
    "TeamState",
    "UserRole",
    "UserState",
    # Entities
    "Team",
    "User",
    "Space",
    "SpaceUser",
    "OpenInvitation",
]
