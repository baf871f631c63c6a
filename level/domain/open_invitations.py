"""
Open invitation rules

An open invitation link is only handed out while the invitation is usable.
"""

import secrets
from typing import Optional

from .entities import OpenInvitation, OpenInvitationState

EXPOSABLE_STATES = frozenset({OpenInvitationState.ACTIVE})


def generate_token() -> str:
    return secrets.token_urlsafe(24)


def is_exposable(invitation: Optional[OpenInvitation]) -> bool:
    return invitation is not None and invitation.state in EXPOSABLE_STATES


def open_invitation_url(invitation: Optional[OpenInvitation], base_url: str) -> Optional[str]:
    """
    Build the public URL for ``invitation``, or None when it may not be shared.

    >>> open_invitation_url(OpenInvitation(token="abc123"), "http://level.test:4001")
    'http://level.test:4001/invites/abc123'
    """
    if not is_exposable(invitation):
        return None
    return f"{base_url.rstrip('/')}/invites/{invitation.token}"
