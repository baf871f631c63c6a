from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from level.domain.entities import Space


class ISpaceRepository(ABC):
    """Space repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, space_id: UUID) -> Optional[Space]:
        """Get space by ID"""
        pass

    @abstractmethod
    async def create(self, space: Space) -> Space:
        """Create a new space"""
        pass
