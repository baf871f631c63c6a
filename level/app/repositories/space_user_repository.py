from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from level.domain.entities import SpaceUser


class ISpaceUserRepository(ABC):
    """SpaceUser repository interface - application layer"""

    @abstractmethod
    async def get_by_space_and_user(
        self, space_id: UUID, user_id: UUID
    ) -> Optional[SpaceUser]:
        """Get a user's membership in a space"""
        pass

    @abstractmethod
    async def create(self, space_user: SpaceUser) -> SpaceUser:
        """Create a new space membership"""
        pass
