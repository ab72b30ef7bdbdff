"""
Repository для связей задач.
"""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.issue_links import IssueLinkModel, LinkType
from src.repository.base import BaseRepository


class IssueLinkRepository(BaseRepository[IssueLinkModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=IssueLinkModel)

    async def link_exists(
        self, from_issue_id: UUID, to_issue_id: UUID, link_type: LinkType
    ) -> bool:
        return await self.exists(
            from_issue_id=from_issue_id, to_issue_id=to_issue_id, type=link_type
        )

    async def links_from(self, issue_id: UUID) -> List[IssueLinkModel]:
        return await self.filter_by(
            order_by=[IssueLinkModel.created_at], from_issue_id=issue_id
        )

    async def links_to(self, issue_id: UUID) -> List[IssueLinkModel]:
        return await self.filter_by(
            order_by=[IssueLinkModel.created_at], to_issue_id=issue_id
        )
