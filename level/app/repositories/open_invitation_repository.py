from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from level.domain.entities import OpenInvitation


class IOpenInvitationRepository(ABC):
    """OpenInvitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[OpenInvitation]:
        """Get open invitation by token"""
        pass

    @abstractmethod
    async def get_by_space_id(self, space_id: UUID) -> Optional[OpenInvitation]:
        """Get the newest open invitation of a space"""
        pass

    @abstractmethod
    async def create(self, invitation: OpenInvitation) -> OpenInvitation:
        """Create a new open invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: OpenInvitation) -> OpenInvitation:
        """Update existing open invitation"""
        pass
