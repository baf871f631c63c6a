from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from level.domain.entities import Team


class ITeamRepository(ABC):
    """Team repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID"""
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Team]:
        """Get team by slug"""
        pass

    @abstractmethod
    async def create(self, team: Team) -> Team:
        """Create a new team"""
        pass
