"""
Repository для приглашений в workspace.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.invitations import InvitationModel, InvitationStatus
from src.repository.base import BaseRepository


class InvitationRepository(BaseRepository[InvitationModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=InvitationModel)

    async def get_by_token(self, token: str) -> Optional[InvitationModel]:
        return await self.get_item_by_field("token", token)

    async def pending_exists(self, workspace_id: UUID, email: str) -> bool:
        return await self.exists(
            workspace_id=workspace_id,
            email=email.lower(),
            status=InvitationStatus.PENDING,
        )

    async def list_pending(self, workspace_id: UUID) -> List[InvitationModel]:
        return await self.filter_by(
            order_by=[InvitationModel.created_at.desc()],
            workspace_id=workspace_id,
            status=InvitationStatus.PENDING,
        )
