from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from level.app.repositories.open_invitation_repository import IOpenInvitationRepository
from level.domain.entities import OpenInvitation


class OpenInvitationRepository(IOpenInvitationRepository):
    """OpenInvitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[OpenInvitation]:
        """Get open invitation by token"""
        stmt = select(OpenInvitation).where(OpenInvitation.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_space_id(self, space_id: UUID) -> Optional[OpenInvitation]:
        """Get the newest open invitation of a space"""
        stmt = (
            select(OpenInvitation)
            .where(OpenInvitation.space_id == space_id)
            .order_by(OpenInvitation.inserted_at.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, invitation: OpenInvitation) -> OpenInvitation:
        """Create a new open invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: OpenInvitation) -> OpenInvitation:
        """Update existing open invitation"""
        invitation.updated_at = datetime.utcnow()
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation
