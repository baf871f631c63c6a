"""
SpaceUser Entity

Links a User to a Space with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import SpaceUserRole, SpaceUserState


class SpaceUser(SQLModel, table=True):
    """
    SpaceUser entity - membership of a user in a space.

    Business Rules:
    - (space_id, user_id) must be unique
    - The creator of a space is its OWNER
    - Only OWNER and ADMIN members manage the open invitation
    """

    __tablename__ = "space_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    space_id: UUID = Field(foreign_key="spaces.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: SpaceUserRole = Field(default=SpaceUserRole.MEMBER)
    state: SpaceUserState = Field(default=SpaceUserState.ACTIVE)

    # Timestamps
    inserted_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("space_users_space_id_user_id_index", "space_id", "user_id", unique=True),
    )
