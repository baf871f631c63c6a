from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from level.app.repositories.space_repository import ISpaceRepository
from level.domain.entities import Space


class SpaceRepository(ISpaceRepository):
    """Space repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, space_id: UUID) -> Optional[Space]:
        """Get space by ID"""
        stmt = select(Space).where(Space.id == space_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, space: Space) -> Space:
        """Create a new space"""
        self.session.add(space)
        await self.session.flush()
        await self.session.refresh(space)
        return space
