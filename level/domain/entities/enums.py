"""
Level Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TeamState(str, Enum):
    """Team lifecycle state"""

    ACTIVE = "ACTIVE"


class UserState(str, Enum):
    """User account state"""

    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


class UserRole(str, Enum):
    """User role within a team"""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class SpaceState(str, Enum):
    """Space lifecycle state"""

    ACTIVE = "ACTIVE"


class SpaceUserRole(str, Enum):
    """User role within a space"""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class SpaceUserState(str, Enum):
    """Space membership state"""

    ACTIVE = "ACTIVE"


class OpenInvitationState(str, Enum):
    """Open invitation state. REVOKED is terminal."""

    ACTIVE = "ACTIVE"
    REVOKED = "REVOKED"
