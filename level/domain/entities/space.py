"""
Space Entity

A messaging area within a team.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import SpaceState


class Space(SQLModel, table=True):
    __tablename__ = "spaces"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    slug: str = Field(max_length=20)
    state: SpaceState = Field(default=SpaceState.ACTIVE)

    # Timestamps
    inserted_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("spaces_team_id_slug_index", "team_id", "slug", unique=True),
    )
