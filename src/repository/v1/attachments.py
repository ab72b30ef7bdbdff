"""
Repository для работы с вложениями задач.
"""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.attachments import AttachmentModel
from src.repository.base import BaseRepository


class AttachmentRepository(BaseRepository[AttachmentModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=AttachmentModel)

    async def list_by_issue(self, issue_id: UUID) -> List[AttachmentModel]:
        return await self.filter_by(
            order_by=[AttachmentModel.created_at.desc()], issue_id=issue_id
        )
