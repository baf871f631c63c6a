from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from level.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_team_and_email(self, team_id: UUID, email: str) -> Optional[User]:
        """Get user by email within a team"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass
