from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from level.app.repositories.space_user_repository import ISpaceUserRepository
from level.domain.entities import SpaceUser


class SpaceUserRepository(ISpaceUserRepository):
    """SpaceUser repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_space_and_user(
        self, space_id: UUID, user_id: UUID
    ) -> Optional[SpaceUser]:
        """Get a user's membership in a space"""
        stmt = select(SpaceUser).where(
            SpaceUser.space_id == space_id,
            SpaceUser.user_id == user_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, space_user: SpaceUser) -> SpaceUser:
        """Create a new space membership"""
        self.session.add(space_user)
        await self.session.flush()
        await self.session.refresh(space_user)
        return space_user
