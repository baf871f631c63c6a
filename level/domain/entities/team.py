"""
Team Entity

The tenant every user, space and invitation belongs to.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import TeamState


class Team(SQLModel, table=True):
    """
    Team entity - isolated workspace for an organization.

    Business Rules:
    - Slug is globally unique and used to address the team on login
    - Created together with its first OWNER on signup
    """

    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(max_length=20)

    state: TeamState = Field(default=TeamState.ACTIVE)

    # Timestamps
    inserted_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("teams_slug_index", "slug", unique=True),)
