"""
User Entity

A user always belongs to a team and has a specific role in the team.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import UserRole, UserState


class User(SQLModel, table=True):
    """
    User entity - a person within exactly one team.

    Business Rules:
    - Email and username are unique within a team
    - Password stored as bcrypt hash; the plaintext never reaches this table
    - state and role fall back to database defaults when not given
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)

    state: UserState = Field(
        default=UserState.ACTIVE,
        sa_column_kwargs={"server_default": UserState.ACTIVE.value},
    )
    role: UserRole = Field(
        default=UserRole.MEMBER,
        sa_column_kwargs={"server_default": UserRole.MEMBER.value},
    )

    email: str = Field(max_length=254)
    username: str = Field(max_length=20)
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    time_zone: Optional[str] = Field(default=None, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Timestamps
    inserted_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("users_team_id_email_index", "team_id", "email", unique=True),
        Index("users_team_id_username_index", "team_id", "username", unique=True),
    )
