"""
OpenInvitation Entity

A shareable link that lets anyone join a space while it is active.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import OpenInvitationState


class OpenInvitation(SQLModel, table=True):
    """
    OpenInvitation entity - revocable invitation link for a space.

    Business Rules:
    - Created ACTIVE together with its space
    - ACTIVE -> REVOKED is one-way
    - Token is URL-safe and cryptographically random
    """

    __tablename__ = "open_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    space_id: UUID = Field(foreign_key="spaces.id", nullable=False, index=True)
    token: str = Field(unique=True, index=True, max_length=64)
    state: OpenInvitationState = Field(default=OpenInvitationState.ACTIVE)

    # Timestamps
    inserted_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_open_invitation_state", "state"),)
